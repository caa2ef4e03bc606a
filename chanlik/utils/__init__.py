"""Shared helpers: errors, numerics, tensor conversion, logging, configs."""
