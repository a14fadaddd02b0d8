"""
Attribute Controller - decorator stack for product attribute query controllers.

Main entry point for wrapping attribute controllers with decorators.
"""

from attribute_controller.decorator.base import BaseAttributeDecorator
from attribute_controller.factory import ControllerFactory

__all__ = ["BaseAttributeDecorator", "ControllerFactory"]
