"""Canned replies for the chat widget.

Replies are chosen by plain substring matching against an ordered list of
keyword rules; the first rule with a matching keyword wins. Nothing is
learned or remembered between calls.
"""

DEFAULT_SITE = {
    'site_name': 'Shashank SAP Training',
    'phones': ['+91 98765 43210', '+91 98765 43211'],
    'support_email': 'info@shashanksaptraining.com',
    'location': 'Hyderabad, Telangana',
    'office_hours': 'Mon-Sat: 9 AM - 8 PM',
}

COURSES_REPLY = (
    "We offer comprehensive SAP training in:\n\n"
    "🔹 SAP S/4 HANA\n🔹 SAP FICO\n🔹 SAP ABAP\n🔹 SAP MM\n🔹 SAP SD\n"
    "🔹 SAP Fiori\n🔹 SAP HANA\n🔹 And more!\n\n"
    "Which course interests you?"
)

S4HANA_REPLY = (
    "SAP S/4 HANA is our most trending course! 🔥\n\n"
    "✅ Latest SAP Technology\n✅ Real-time Data Processing\n"
    "✅ Fiori UX Integration\n✅ Migration Strategies\n✅ Hands-on Projects\n\n"
    "Duration: 60 Days\n\n"
    "Would you like to know about fees or schedule a demo?"
)

FICO_REPLY = (
    "SAP FICO is perfect for finance professionals! ⭐\n\n"
    "✅ Financial Accounting (FI)\n✅ Controlling (CO)\n"
    "✅ Asset Accounting\n✅ End-to-End Implementation\n\n"
    "Duration: 45 Days\n\n"
    "Interested in enrollment or a free demo?"
)

FEES_REPLY = (
    "Our course fees are competitive with flexible payment options:\n\n"
    "💳 Installment Plans Available\n🎁 Early Bird Discounts\n"
    "👥 Group Discounts\n🏢 Corporate Training Packages\n\n"
    "For exact pricing, our team will contact you at:\n"
    "📧 {email}\n📱 {phone}"
)

SCHEDULE_REPLY = (
    "We offer flexible batch timings:\n\n"
    "⏰ Weekday Batches: Mon-Fri\n⏰ Weekend Batches: Sat-Sun\n"
    "⏰ Fast Track Available\n\n"
    "Morning and Evening slots available!\n"
    "What timing works best for you?"
)

DEMO_REPLY = (
    "Great! We offer FREE demo classes! 🎉\n\n"
    "Our team will reach out to you at:\n📧 {email}\n📱 {phone}\n\n"
    "You can also call us directly:\n☎️ {primary_phone}"
)

JOBS_REPLY = (
    "Yes! We provide comprehensive job assistance! 💼\n\n"
    "✅ 95% Placement Rate\n✅ Resume Building\n✅ Interview Preparation\n"
    "✅ Job Referrals\n✅ Mock Interviews\n✅ Career Guidance\n\n"
    "Many students placed in top MNCs!"
)

CONTACT_REPLY = (
    "Contact us anytime:\n\n"
    "{phone_lines}\n📧 {support_email}\n📍 {location}\n\n"
    "⏰ {office_hours}"
)

LOCATION_REPLY = (
    "We're located in {location}, India\n\n"
    "🏫 Classroom Training Available\n💻 Online Training Available\n\n"
    "Which mode interests you?"
)

GREETING_REPLY = "Hello {name}! 👋\nHow can I assist you today?"

THANKS_REPLY = "You're welcome! 😊\nIs there anything else you'd like to know?"

FALLBACK_REPLY = (
    "Thank you for your message! Our team will contact you soon at "
    "{email} or {phone}.\n\n"
    "You can ask about:\n• Course Details\n• Training Schedules\n"
    "• Fees & Payment\n• Job Assistance\n• Demo Classes\n\n"
    "Or call us at: {primary_phone}"
)

# Order matters: the first rule with a matching keyword is used.
RULES = [
    (('course', 'training', 'learn'), COURSES_REPLY),
    (('s/4', 's4', 'hana'), S4HANA_REPLY),
    (('fico', 'finance', 'accounting'), FICO_REPLY),
    (('fee', 'cost', 'price', 'payment'), FEES_REPLY),
    (('schedule', 'timing', 'batch', 'when'), SCHEDULE_REPLY),
    (('demo', 'trial', 'free'), DEMO_REPLY),
    (('job', 'placement', 'career'), JOBS_REPLY),
    (('contact', 'phone', 'email', 'call'), CONTACT_REPLY),
    (('location', 'address', 'where'), LOCATION_REPLY),
    (('hello', 'hi', 'hey'), GREETING_REPLY),
    (('thank', 'thanks'), THANKS_REPLY),
]


def _context(user_info, site):
    user_info = user_info or {}
    site = dict(DEFAULT_SITE, **(site or {}))
    phones = site['phones'] or ['']
    return {
        'name': user_info.get('name') or 'there',
        'email': user_info.get('email') or 'your email',
        'phone': user_info.get('phone') or 'your phone number',
        'primary_phone': phones[0],
        'phone_lines': '\n'.join(f'☎️ {p}' for p in phones),
        'support_email': site['support_email'],
        'location': site['location'],
        'office_hours': site['office_hours'],
        'site_name': site['site_name'],
    }


def match_rule(message):
    """Return the index of the first rule matching ``message``, or None."""
    text = (message or '').lower()
    for index, (keywords, _template) in enumerate(RULES):
        if any(keyword in text for keyword in keywords):
            return index
    return None


def generate_reply(message, user_info=None, site=None):
    """Pick the canned reply for ``message``.

    ``user_info`` holds the visitor's name, email and phone; ``site`` can
    override the contact details in ``DEFAULT_SITE``.
    """
    index = match_rule(message)
    template = FALLBACK_REPLY if index is None else RULES[index][1]
    return template.format(**_context(user_info, site))


def greeting(user_info=None, site=None):
    """Welcome messages shown once a visitor has signed up."""
    context = _context(user_info, site)
    return [
        f"Hello {context['name']}! 👋 Welcome to {context['site_name']}!",
        "I'm here to help you with:\n• Course Information\n• Training Schedules\n"
        "• Fees & Payment Options\n• Job Assistance\n• Free Demo Classes\n\n"
        "What would you like to know?",
    ]


def site_details(config):
    """Build the ``site`` mapping from a Flask config."""
    return {
        'site_name': config.get('SITE_NAME', DEFAULT_SITE['site_name']),
        'phones': list(config.get('SUPPORT_PHONES', DEFAULT_SITE['phones'])),
        'support_email': config.get('SUPPORT_EMAIL', DEFAULT_SITE['support_email']),
        'location': config.get('SITE_LOCATION', DEFAULT_SITE['location']),
        'office_hours': config.get('OFFICE_HOURS', DEFAULT_SITE['office_hours']),
    }
