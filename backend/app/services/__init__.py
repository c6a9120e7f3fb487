# Services package init
"""
Roster API - Services Layer
===========================

What:  Business logic sitting between routes (HTTP) and the in-memory stores.
How:   Plain classes and functions with no knowledge of HTTP; routes call
       them and global handlers translate their exceptions into responses.

Service Inventory:
    - UserRepository: In-memory user store with locked CRUD operations
    - validation:     require_name, parse_user_id
    - query:          filter_by_name (search), paginate (offset pagination)
"""
