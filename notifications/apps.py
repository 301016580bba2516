from django.apps import AppConfig
import os
import sys


class NotificationsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "notifications"

    def ready(self):
        # --------------------------------------------------
        # Start the attestation scheduler SAFELY
        # --------------------------------------------------
        # manage.py commands never own the scheduler, except the
        # runserver autoreload child (RUN_MAIN=true). Under a WSGI
        # server the toggle alone decides.
        if sys.argv and os.path.basename(sys.argv[0]) == "manage.py":
            if "runserver" not in sys.argv or os.environ.get("RUN_MAIN") != "true":
                return

        from .scheduler import start_scheduler
        start_scheduler()
