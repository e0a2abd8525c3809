from datetime import datetime

from extensions import db
from models.contact import Contact, utcnow

SAMPLE_CONTACTS = [
    {
        "first_name": "John",
        "last_name": "Doe",
        "workplace": "Acme Inc.",
        "email": "john.doe@example.com",
        "known_from": "Conference",
        "comments": "Met at TechConf 2023. Interested in frontend development.",
        "last_contact_date": datetime(2023, 12, 15),
    },
    {
        "first_name": "Jane",
        "last_name": "Smith",
        "workplace": "Tech Solutions",
        "email": "jane.smith@example.com",
        "known_from": "Former Colleague",
        "comments": "Worked together at Dev Corp from 2019-2021. Expert in backend systems.",
        "last_contact_date": datetime(2024, 2, 20),
    },
    {
        "first_name": "Alice",
        "last_name": "Johnson",
        "workplace": "InnovateTech",
        "email": "alice.j@example.com",
        "known_from": "Meetup",
        "comments": "Local JavaScript meetup organizer. Great public speaker.",
        "last_contact_date": datetime(2024, 1, 10),
    },
    {
        "first_name": "Bob",
        "last_name": "Brown",
        "workplace": "Cloud Systems",
        "email": "bob.b@example.com",
        "known_from": "Industry Event",
        "comments": "Cloud architecture specialist. Interested in mentoring junior developers.",
        "last_contact_date": datetime(2024, 3, 5),
    },
    {
        "first_name": "Sarah",
        "last_name": "Lee",
        "workplace": "Digital Agency",
        "email": "sarah.lee@example.com",
        "known_from": "Client",
        "comments": "Former client, now a good professional contact. Expertise in UX design.",
        "last_contact_date": datetime(2023, 10, 30),
    },
]


def seed_contacts():
    """Seeds the database with the sample contacts. Must run inside an app context."""
    print("🌱 Seeding contacts...")
    added_count = 0
    for data in SAMPLE_CONTACTS:
        if Contact.query.filter_by(email=data['email']).first():
            print(f"   - Skipping '{data['email']}', already exists.")
            continue

        db.session.add(Contact(last_update=utcnow(), **data))
        added_count += 1
        print(f"   + Adding '{data['email']}'.")

    if added_count > 0:
        db.session.commit()
        print(f"✅ Successfully added {added_count} new contacts.")
    else:
        print("✅ No new contacts to add.")
    return added_count


if __name__ == "__main__":
    from app import app

    with app.app_context():
        seed_contacts()
