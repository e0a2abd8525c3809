from .contact_client import ContactApiError, ContactClient
from .views import ContactDetailView, ContactListView, filter_contacts, sort_contacts, truncate_comment
