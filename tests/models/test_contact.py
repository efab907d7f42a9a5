import unittest

from pydantic import ValidationError

from models.contact import ContactBatch, ContactUpsertItem


class TestContactUpsertItem(unittest.TestCase):

    def test_defaults_to_email_id_property(self):
        item = ContactUpsertItem(id='a@x.com', properties={'email': 'a@x.com'})
        self.assertEqual(item.id_property, 'email')

    def test_populate_by_alias(self):
        item = ContactUpsertItem(id='a@x.com', idProperty='email', properties={})
        self.assertEqual(item.id_property, 'email')

    def test_to_payload_uses_camel_case(self):
        item = ContactUpsertItem(id='a@x.com', properties={'email': 'a@x.com', 'name': 'Ann'})

        self.assertEqual(item.to_payload(), {
            'id': 'a@x.com',
            'idProperty': 'email',
            'properties': {'email': 'a@x.com', 'name': 'Ann'},
        })

    def test_missing_id_allowed(self):
        item = ContactUpsertItem(properties={'name': 'Ann'})
        self.assertIsNone(item.id)
        self.assertIsNone(item.to_payload()['id'])

    def test_extra_fields_rejected(self):
        with self.assertRaises(ValidationError):
            ContactUpsertItem(id='a@x.com', properties={}, unexpected='x')


class TestContactBatch(unittest.TestCase):

    def test_to_payload(self):
        batch = ContactBatch(inputs=[
            ContactUpsertItem(id='a@x.com', properties={'email': 'a@x.com'}),
            ContactUpsertItem(id='b@x.com', properties={'email': 'b@x.com'}),
        ])

        payload = batch.to_payload()

        self.assertEqual(len(batch), 2)
        self.assertEqual([i['id'] for i in payload['inputs']], ['a@x.com', 'b@x.com'])
        self.assertTrue(all(i['idProperty'] == 'email' for i in payload['inputs']))


if __name__ == '__main__':
    unittest.main()
