#!/usr/bin/env python3
"""
Flask entry point for Document Chat Service.

Loads configuration from the environment (.env supported), wires the
application and serves /chat, /health and the static frontend.
"""
import atexit
import logging

from docchat import DocChatApp, load_config_from_env
from docchat.web import create_app

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger(__name__)

config = load_config_from_env()
docchat_app = DocChatApp(config)
docchat_app.initialize()
atexit.register(docchat_app.shutdown)

logger.info(
    "Config: provider=%s model=%s max_turns=%s session_ttl=%s",
    config.llm_provider,
    config.llm_model,
    config.memory_max_turns,
    config.session_ttl_seconds,
)

app = create_app(docchat_app.orchestrator, config)


if __name__ == "__main__":
    logger.info("Server running at http://localhost:%s", config.port)
    app.run(host="0.0.0.0", port=config.port, debug=False, threaded=True)
