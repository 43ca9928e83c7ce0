"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations of ``BeneficioPort`` (HTTP and an
    in-memory double) plus the local settings store.

Dependencies:
    ``http_client`` and ``beneficio_rest`` depend on ``requests``; the rest use
    the filesystem or plain Python only.

Call context:
    Imported by ``beneficios.app.controller`` for runtime wiring and by tests
    for transport-level behavior verification.
"""
