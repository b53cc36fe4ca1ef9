# web - HTTP surface for the explorer session
from .app import create_app
