"""DTR payroll package.

Feature modules (people, attendance, payroll, auth) each carry a domain model,
a repository Protocol, a MySQL repository, a service and a thin Flask
controller.
"""
