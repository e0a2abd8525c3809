from collections import namedtuple
from datetime import datetime, timedelta, timezone

from sqlalchemy import event, inspect

from extensions import db


def utcnow():
    """Naive UTC timestamp, matching what the DateTime columns store."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_datetime(value):
    """
    Parse an ISO-8601 date or date-time string into a naive UTC datetime.
    Returns None when the value cannot be read as a date.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text[-1] in "Zz":
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _isoformat(value):
    return value.isoformat() if value else None


# One row per business field: JSON key, column attribute, kind, and whether
# an empty string is accepted. Every business field is required on create.
FieldRule = namedtuple("FieldRule", ["key", "attr", "kind", "allow_empty"])

CONTACT_FIELDS = (
    FieldRule("firstName", "first_name", "string", False),
    FieldRule("lastName", "last_name", "string", False),
    FieldRule("email", "email", "string", False),
    FieldRule("workplace", "workplace", "string", True),
    FieldRule("knownFrom", "known_from", "string", True),
    FieldRule("comments", "comments", "text", True),
    FieldRule("lastContactDate", "last_contact_date", "datetime", False),
)


class Contact(db.Model):
    __tablename__ = 'contacts'
    __table_args__ = (
        db.Index('ix_contacts_email', 'email'),
        db.Index('ix_contacts_last_name_first_name', 'last_name', 'first_name'),
        # ids are never reused, even after the highest row is deleted
        {'sqlite_autoincrement': True},
    )

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    first_name = db.Column(db.String(255), nullable=False)
    last_name = db.Column(db.String(255), nullable=False)
    workplace = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    known_from = db.Column(db.String(255), nullable=False)
    comments = db.Column(db.Text, nullable=False)
    last_contact_date = db.Column(db.DateTime, nullable=False)

    last_update = db.Column(db.DateTime, nullable=False, default=utcnow)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def touch(self):
        """Move last_update forward; strictly later than the previous value even within one clock tick."""
        now = utcnow()
        if self.last_update is not None and now <= self.last_update:
            now = self.last_update + timedelta(microseconds=1)
        self.last_update = now

    def to_dict(self):
        return {
            'id': self.id,
            'firstName': self.first_name,
            'lastName': self.last_name,
            'workplace': self.workplace,
            'email': self.email,
            'knownFrom': self.known_from,
            'comments': self.comments,
            'lastContactDate': _isoformat(self.last_contact_date),
            'lastUpdate': _isoformat(self.last_update),
            'createdAt': _isoformat(self.created_at),
            'updatedAt': _isoformat(self.updated_at),
        }

    def __repr__(self):
        return f"<Contact {self.id} {self.first_name} {self.last_name}>"


@event.listens_for(Contact, 'before_update')
def _refresh_last_update(mapper, connection, target):
    # Any modification refreshes last_update unless the caller already moved it.
    state = inspect(target)
    if 'last_update' in state.unloaded:
        target.last_update = utcnow()
    elif not state.attrs.last_update.history.has_changes():
        target.touch()
