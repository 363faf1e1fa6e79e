"""
Farming bounded context: domain layer.

This module contains all domain logic for the farming context:
- Farm management and the farm → crop relation
- Crop management, farm binding and fertilizer association
- Fertilizer catalog lookup
- Harvest date interval queries
"""
