# Routes package init
"""
Roster API - API Routes Package
===============================

What:  HTTP route handlers, one module per lesson group.

Route Inventory:
    - basics.py:       /api1/hello, /api2/user, /api3/greet,
                       /api4/validate, /api5/user_id/{id}
    - crud.py:         /api6/users[/{id}]          (GET, POST, PUT, DELETE)
    - search.py:       /api7/users/search?name=
    - service.py:      /api8/users[/{id}]          (GET, POST via DI)
    - diagnostics.py:  /api9/error
    - pagination.py:   /api10/users?page=&pageSize=
    - health.py:       /health

Routes stay thin: they bind request data, call a repository or a pure
helper, and pick the status code. Errors are raised, never formatted here.
"""
