"""Gunicorn config for container deployment."""
import os

wsgi_app = "wine_agent.main:app"

# Bind to the platform's PORT or default 3001
bind = f"0.0.0.0:{os.environ.get('PORT', '3001')}"

# Uvicorn async workers — each loads its own copy of the wine sheet at startup.
# Tune via WEB_CONCURRENCY env var.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))

# Chat requests wait on several LLM round trips
timeout = 120

# Graceful timeout for shutdown
graceful_timeout = 30

# Keep-alive — must exceed the proxy keep-alive (default 60s)
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
