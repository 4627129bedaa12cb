"""Tests for the sample testimonial seed script."""

import base64

from seed_data import SAMPLE_TESTIMONIALS, badge_image, seed_testimonials


def test_badge_image_is_svg_data_url():
    image = badge_image('SAP MM')
    prefix = 'data:image/svg+xml;base64,'
    assert image.startswith(prefix)
    svg = base64.b64decode(image[len(prefix):]).decode('utf-8')
    assert 'SAP MM' in svg
    assert '#764ba2' in svg


def test_seed_adds_public_testimonials(client, storage):
    assert seed_testimonials(storage) == (len(SAMPLE_TESTIMONIALS), 0)

    body = client.get('/api/testimonials').get_json()
    assert body['count'] == len(SAMPLE_TESTIMONIALS)
    names = {t['name'] for t in body['data']}
    assert names == {s['name'] for s in SAMPLE_TESTIMONIALS}
    assert all(t['image'].startswith('data:image/svg+xml;base64,') for t in body['data'])


def test_seed_twice_refreshes_images_only(client, storage):
    seed_testimonials(storage)
    first = storage.find_one('feedback', 'studentName', 'Amit Patel')
    storage.update('feedback', first['id'], {'imageData': None})

    assert seed_testimonials(storage) == (0, len(SAMPLE_TESTIMONIALS))
    assert len(storage.all('feedback')) == len(SAMPLE_TESTIMONIALS)
    assert storage.get('feedback', first['id'])['imageData'] == badge_image('SAP SD')
