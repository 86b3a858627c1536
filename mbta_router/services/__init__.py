"""Services layer - Application orchestration.

Available services:
- TransitNetworkService: Network queries and journey planning
"""

from .network_service import TransitNetworkService

__all__ = ["TransitNetworkService"]
