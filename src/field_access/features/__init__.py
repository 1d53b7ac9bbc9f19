"""Feature packages for field-access.

- permissions/: permission codec, role tables and role-permission merging
- models/: model definitions, the controller and update validation
"""
