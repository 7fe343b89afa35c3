"""
Boundary layer for external system integrations.

Handles all interactions with Azure Cosmos DB.
Provides adapters and clients for infrastructure dependencies.
"""
