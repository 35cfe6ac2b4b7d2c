"""Time Clock package.

Employees identify themselves with name + date of birth and punch in/out.
Organized by feature modules (employees, attendance) with a thin Flask
controller layer over service/repository layers.
"""
