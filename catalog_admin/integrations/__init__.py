"""
Integrations layer.

Everything that talks to the outside world lives here:
- the products API (primary source and sink)
- the static products file (fallback source)
- the local export sink (fallback for a failed save)

The catalog core only sees the contracts in `contracts/`. Which concrete
clients are used is decided in one place, `catalog_admin.api.main`.
"""
