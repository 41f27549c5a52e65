"""Run the spoofer with ``python -m builder_spoof``."""

from builder_spoof.api.app import run

run()
