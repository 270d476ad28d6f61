# Argumentative — (c) 2025 The Argumentative Authors — MIT Licensed
"""Global logger instance for Argumentative."""
import logging

logger = logging.getLogger("argumentative")
