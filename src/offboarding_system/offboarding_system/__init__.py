"""Offboarding System package.

Feature modules (submissions, ...) with a thin Flask controller layer over
service/repository layers. The application factory lives in ``main``.
"""
