"""Seed script to populate storage with sample testimonials."""

import base64
from datetime import datetime

from sap_training import create_app
from sap_training.storage import get_storage

BADGE_COLOURS = {
    'SAP EWM': '#667eea',
    'SAP MM': '#764ba2',
    'SAP SD': '#4facfe',
    'SAP ABAP': '#f093fb',
    'SAP Fiori': '#00f2fe',
}

SAMPLE_TESTIMONIALS = [
    {
        'name': 'Rajesh Kumar',
        'email': 'rajesh.kumar@example.com',
        'role': 'Senior SAP Consultant',
        'course': 'SAP EWM',
        'rating': 5,
        'text': 'Excellent training program! The instructor was very knowledgeable and the hands-on practice really helped me understand SAP EWM concepts. I got placed in a top MNC within 2 months of completing the course.'
    },
    {
        'name': 'Priya Sharma',
        'email': 'priya.sharma@example.com',
        'role': 'SAP Functional Consultant',
        'course': 'SAP MM',
        'rating': 5,
        'text': "Best SAP MM training I have ever attended. The course content was well-structured and covered all real-time scenarios. The trainer's industry experience added immense value to the learning."
    },
    {
        'name': 'Amit Patel',
        'email': 'amit.patel@example.com',
        'role': 'SAP SD Consultant',
        'course': 'SAP SD',
        'rating': 5,
        'text': 'Outstanding training experience! The practical approach and real-world examples made learning SAP SD very easy. Highly recommend this training center to anyone looking to start their SAP career.'
    },
    {
        'name': 'Sneha Reddy',
        'email': 'sneha.reddy@example.com',
        'role': 'SAP ABAP Developer',
        'course': 'SAP ABAP',
        'rating': 5,
        'text': 'The SAP ABAP course was comprehensive and well-paced. The trainer explained complex concepts in a simple manner. The project work and coding practice sessions were extremely helpful.'
    },
    {
        'name': 'Vikram Singh',
        'email': 'vikram.singh@example.com',
        'role': 'SAP Fiori Developer',
        'course': 'SAP Fiori',
        'rating': 5,
        'text': 'Great learning experience! The SAP Fiori training covered everything from basics to advanced topics. The hands-on exercises and real-time project scenarios prepared me well for my current role.'
    },
]


def badge_image(label):
    """A 400x300 SVG badge for ``label`` as a base64 data URL."""
    colour = BADGE_COLOURS.get(label, '#667eea')
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg" width="400" height="300">'
        f'<rect width="400" height="300" fill="{colour}"/>'
        '<text x="50%" y="50%" dominant-baseline="middle" text-anchor="middle" '
        'font-family="Arial, sans-serif" font-size="60" fill="white" '
        f'font-weight="bold">{label}</text></svg>'
    )
    return 'data:image/svg+xml;base64,' + base64.b64encode(svg.encode('utf-8')).decode('ascii')


def seed_testimonials(storage):
    """Add the sample testimonials; refresh images of ones already present.

    Returns (added, updated) counts.
    """
    added = updated = 0
    for sample in SAMPLE_TESTIMONIALS:
        image = badge_image(sample['course'])
        existing = storage.find_by('feedback', 'studentName', sample['name'])
        if existing:
            for row in existing:
                storage.update('feedback', row['id'], {'imageData': image})
                updated += 1
            continue

        storage.add('feedback', {
            'studentName': sample['name'],
            'studentEmail': sample['email'],
            'courseCompleted': sample['course'],
            'role': sample['role'],
            'overallRating': sample['rating'],
            'instructorRating': sample['rating'],
            'contentRating': sample['rating'],
            'feedbackText': sample['text'],
            'improvements': '',
            'displayPublicly': True,
            'imageData': image,
            'status': 'approved',
            'timestamp': datetime.utcnow().isoformat()
        })
        added += 1
    return added, updated


def seed_database():
    """Seed the configured backend with sample data."""
    app = create_app()

    with app.app_context():
        storage = get_storage()
        print(f'Seeding {storage.name} storage...')
        added, updated = seed_testimonials(storage)
        print(f'Added {added} testimonials, refreshed images on {updated}.')


if __name__ == '__main__':
    seed_database()
