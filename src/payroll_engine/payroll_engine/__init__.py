"""Payroll engine package.

Organized by feature modules (attendance, payroll, advances, ...) with
service/repository layers. The payroll builder itself is a pure computation;
storage is reached only through the repository interfaces.
"""
