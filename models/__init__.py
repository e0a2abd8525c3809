from .contact import Contact, CONTACT_FIELDS, FieldRule, parse_datetime, utcnow

# Ensure all models are imported here so SQLAlchemy knows about them
