"""Allow ``python -m surfmesh``."""
from surfmesh.cli import app

app()
