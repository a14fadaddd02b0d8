"""Attribute controller decorators."""

from attribute_controller.decorator.base import BaseAttributeDecorator

__all__ = ["BaseAttributeDecorator"]
