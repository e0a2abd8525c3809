from .contact_routes import contact_bp
from .health_routes import health_bp
