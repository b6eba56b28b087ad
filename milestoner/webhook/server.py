"""Webhook HTTP server for GitHub events.

Serves a health check, the plugin help and the webhook path. When a
webhook secret is configured, deliveries must carry a valid
X-Hub-Signature-256 header.
"""

import hashlib
import hmac
import json
import logging
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Any
from urllib.parse import parse_qs, urlsplit

from milestoner.config import AppConfig
from milestoner.plugins.help import plugin_help
from milestoner.webhook.handlers import handle_github_event

LOG = logging.getLogger("milestoner.webhook")

SIGNATURE_HEADER = "X-Hub-Signature-256"


def verify_signature(secret: str, body: bytes, signature: str | None) -> bool:
    """Check a ``sha256=<hex>`` HMAC signature of body."""
    if not signature or not signature.startswith("sha256="):
        return False
    expected = hmac.new(secret.encode(), body, hashlib.sha256).hexdigest()
    return hmac.compare_digest(expected, signature[len("sha256=") :])


class WebhookHandler(BaseHTTPRequestHandler):
    """Handle GET /health, GET /plugins/help and POST /webhook/github."""

    config: AppConfig

    def _send_json(self, status: int, data: Any) -> None:
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.end_headers()
        self.wfile.write(json.dumps(data).encode())

    def do_GET(self) -> None:
        url = urlsplit(self.path)
        if url.path == "/health" or url.path == "/":
            self._send_json(200, {"status": "ok", "service": "milestoner"})
            return
        if url.path == "/plugins/help":
            repos = parse_qs(url.query).get("repo", [])
            self._send_json(200, plugin_help(self.config, repos))
            return
        self.send_response(404)
        self.end_headers()

    def do_POST(self) -> None:
        if self.path == self.config.github.webhook_path:
            self._handle_github_webhook()
            return
        self.send_response(404)
        self.end_headers()

    def _parse_webhook_body(self, body: bytes) -> dict:
        """Parse webhook body as JSON.

        Supports raw JSON and application/x-www-form-urlencoded (payload=...).
        """
        if not body:
            return {}
        content_type = self.headers.get("Content-Type", "")
        if "application/x-www-form-urlencoded" in content_type:
            parsed = parse_qs(body.decode("utf-8", errors="replace"), keep_blank_values=True)
            raw = (parsed.get("payload") or [None])[0]
            if raw is None:
                return {}
            return json.loads(raw)
        return json.loads(body.decode())

    def _handle_github_webhook(self) -> None:
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length) if length else b""
        secret = self.config.webhook_secret_resolved
        if secret and not verify_signature(secret, body, self.headers.get(SIGNATURE_HEADER)):
            LOG.warning("Rejected webhook delivery %s: bad signature", self.headers.get("X-GitHub-Delivery", ""))
            self._send_json(401, {"error": "invalid signature"})
            return
        try:
            payload = self._parse_webhook_body(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            LOG.warning("Invalid webhook JSON (%s bytes)", len(body))
            self._send_json(400, {"error": "invalid JSON"})
            return
        if not isinstance(payload, dict):
            LOG.warning("Webhook payload is a %s, not an object", type(payload).__name__)
            self._send_json(400, {"error": "payload must be a JSON object"})
            return
        event = self.headers.get("X-GitHub-Event", "")
        LOG.info("Webhook event: %s (action=%s)", event, payload.get("action"))
        try:
            handle_github_event(self.config, event, payload)
        except Exception as e:
            LOG.exception("Failed to handle %s event: %s", event, e)
        self._send_json(200, {"received": True})

    def log_message(self, format: str, *args: Any) -> None:
        LOG.debug(format, *args)


def run_webhook_server(config: AppConfig) -> None:
    """Run HTTP server for webhooks and health check."""
    host = config.webhook.host
    port = config.webhook.port
    WebhookHandler.config = config
    server = HTTPServer((host, port), WebhookHandler)
    LOG.info("Webhook server listening on %s:%s", host, port)
    server.serve_forever()
