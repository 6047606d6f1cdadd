"""Interfaces (ports) for GAKUMU.

Abstract contracts the service layer depends on: the container runtime that
builds and runs the stack, and the readiness probes that tell when a started
service can answer requests. Adapters implement these; tests swap them for
in-memory versions.
"""
