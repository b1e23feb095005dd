from positions.services.position_service import PositionService

__all__ = ["PositionService"]
