"""
Contracts (data models).

This folder defines the request/response shapes shared by the dashboard and the mock service.
Examples:
- Catalog entries (ApiDefinition)
- Normalized call outcomes (ResultRecord)
- Mock service request bodies

Both the mock clients and the real HTTP clients use these contracts.
"""
