from flask import Blueprint

# page routes and the JSON API the page calls back into
main_bp = Blueprint("main", __name__)
api_bp = Blueprint("api", __name__, url_prefix="/api")

from . import pages    # noqa: F401,E402
from . import api      # noqa: F401,E402
