# Gunicorn config: worker timeout above the collaborator timeout so a slow comparison is not killed mid-call
# Loaded via: gunicorn -c gunicorn.conf.py app:app
import os

bind = f"0.0.0.0:{os.environ.get('PORT', '5000')}"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))
timeout = 120
