"""Slack payloads built on the instructions compiler."""
