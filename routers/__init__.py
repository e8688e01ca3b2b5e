# routers/__init__.py
from . import (
     analysis,
     documents,
     indexation,
     maintenance,
     payments,
     properties,
     reminders,
     reports,
     settings,
     tenants,
)

ALL_ROUTERS = [
     tenants.router,
     properties.router,
     payments.router,
     maintenance.router,
     reminders.router,
     documents.router,
     settings.router,
     indexation.router,
     reports.router,
     analysis.router,
]
