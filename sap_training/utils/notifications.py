"""Best-effort notifications for new enquiries.

Nothing here raises: a failed email or SNS publish is logged and the
request that triggered it carries on.
"""

import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from flask import current_app
from flask_mail import Message

from sap_training.extensions import mail

logger = logging.getLogger(__name__)


def contact_message(contact):
    """Subject and body describing a new contact submission."""
    subject = f"New enquiry from {contact.get('name')}"
    body = (
        f"Name: {contact.get('name')}\n"
        f"Email: {contact.get('email')}\n"
        f"Phone: {contact.get('phone')}\n"
        f"Course: {contact.get('course')}\n"
        f"Message: {contact.get('message')}\n"
        f"Received: {contact.get('timestamp')}\n"
    )
    return subject, body


def send_email(subject, body):
    """Send via Flask-Mail when a server login and recipient are configured."""
    config = current_app.config
    recipient = config.get('NOTIFY_EMAIL')
    if not recipient or not config.get('MAIL_USERNAME'):
        logger.debug("Email notification skipped: mail not configured")
        return False
    try:
        mail.send(Message(subject=subject, recipients=[recipient], body=body,
                          sender=config.get('MAIL_DEFAULT_SENDER')))
    except Exception as e:
        logger.warning(f"Error sending email notification: {e}")
        return False
    return True


def publish_sns(subject, body):
    """Publish to SNS_TOPIC_ARN when one is configured."""
    topic_arn = current_app.config.get('SNS_TOPIC_ARN')
    if not topic_arn:
        return False
    try:
        sns = boto3.client('sns', region_name=current_app.config.get('AWS_REGION'))
        sns.publish(TopicArn=topic_arn, Subject=subject[:100], Message=body)
    except (BotoCoreError, ClientError) as e:
        logger.warning(f"Error sending SNS notification: {e}")
        return False
    return True


def notify_new_contact(contact):
    """Tell the team about a new contact form submission."""
    subject, body = contact_message(contact)
    sent_email = send_email(subject, body)
    sent_sns = publish_sns(subject, body)
    return sent_email or sent_sns
