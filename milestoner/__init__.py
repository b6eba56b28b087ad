"""Milestoner: /milestone and /status comment commands for GitHub."""
