"""Game engine building blocks: vector math, containers, file helpers, events and an ECS."""

__version__ = "0.1.0"