"""WSGI entrypoint for deploying the SalaryAdjust backend behind Passenger."""

from salaryadjust.backend.app import create_app

# Passenger expects a module-level variable named ``application``.
application = create_app()
