from extensions import db


def reset_database(confirm=input):
    """
    Drops all tables and recreates them based on the current models.
    USE WITH CAUTION IN DEVELOPMENT ONLY. This will delete all data.
    Must run inside an app context.
    """
    print("--- ⚠️  WARNING: This will delete ALL data in the database. ---")
    answer = confirm("This is a destructive operation. Type 'reset' to continue: ")
    if answer.lower() != 'reset':
        print("Aborted.")
        return False

    print("🔥 Dropping all tables...")
    db.drop_all()
    print("✅ All tables dropped.")

    print("🚀 Recreating all tables from models...")
    db.create_all()
    print("✅ All tables recreated successfully. You can now restart your Flask server.")
    return True


if __name__ == "__main__":
    from app import app

    with app.app_context():
        reset_database()
