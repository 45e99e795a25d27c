"""Infrastructure Layer: document store client, repositories and logging setup.

Invariants:
    - Infrastructure never imports from api/
    - Every driver call is wrapped with error mapping (PyMongoError -> DatabaseError)
"""
