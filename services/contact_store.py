from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from models.contact import Contact

# Signed 64-bit range of an INTEGER primary key
_MIN_ID = -(2 ** 63)
_MAX_ID = 2 ** 63 - 1


class ContactStore:
    """
    Raw persistence access for contacts, one method per CRUD verb.
    Absence is reported with None/False; database errors are rolled back and re-raised.
    """

    def find_all(self):
        return Contact.query.all()

    def find_by_id(self, contact_id):
        if not _MIN_ID <= contact_id <= _MAX_ID:
            return None
        return db.session.get(Contact, contact_id)

    def create(self, data):
        contact = Contact(**data)
        db.session.add(contact)
        self._commit()
        return contact

    def update(self, contact_id, data):
        """Merge column values into an existing contact and refresh last_update."""
        contact = self.find_by_id(contact_id)
        if contact is None:
            return None

        for attr, value in data.items():
            setattr(contact, attr, value)
        contact.touch()

        self._commit()
        return contact

    def delete(self, contact_id):
        contact = self.find_by_id(contact_id)
        if contact is None:
            return False

        db.session.delete(contact)
        self._commit()
        return True

    def _commit(self):
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
