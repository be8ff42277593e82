# apps/admin_dashboard/__init__.py
"""
Admin Dashboard Module for the NADA console

- Queue counters for reports, songs, applications and contact messages
- Audit trail of every admin mutation
"""
