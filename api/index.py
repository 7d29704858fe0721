"""
Vercel entry point for the Todo API
"""
import sys
import os

# Add parent directory to path
parent_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if parent_dir not in sys.path:
    sys.path.insert(0, parent_dir)

os.environ.setdefault("ENV", "production")

from mangum import Mangum
from src.main import app

# Lambda handler for the ASGI app; lifespan opens the database on cold start
handler = Mangum(app, lifespan="auto")
