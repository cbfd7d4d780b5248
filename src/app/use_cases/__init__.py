"""
Use Cases

Organized into domain folders:
- auth/: Registration and login
- subscriptions/: Plans, checkout, billing and renewal
- factories/: Factory management
- emission_sources/: Emission factor catalog
- emission_records/: Monthly emission records
- goals/: Sustainability goals
- users/: Users and invitations
- dashboards/: Role dashboards
- admin/: Platform administration

Import from subdirectories.
"""
