from flask import Blueprint

# Create the versioned blueprint
v1_bp = Blueprint("v1", __name__)

# Import route modules so they register with v1_bp
from . import health
from . import auth
from . import catalog
from . import sections
from . import blocks
from . import features
from . import services
from . import gallery
from . import overlay
from . import public
from . import audit
