from rotationpairing.controllers.rotation_manager import RotationManager

__all__ = ["RotationManager"]
