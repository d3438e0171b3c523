"""Weekly Fitness Tracker package.

This package contains the core modules: config, models, registry,
data_loader, reporter.
"""

__all__ = [
    'config',
    'models',
    'registry',
    'data_loader',
    'reporter'
]
