"""
notifications/management/commands/run_attestation_scheduler.py

On-demand / cron entry point for the attestation scheduler.

- Default: one full pass (all stages, fixed order)
- --stage: run a single stage
- --serve: keep the recurring background scheduler alive in this
  process until interrupted

Every stage is idempotent (send-once markers), so this is safe to
run as often as needed.
"""

import time

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from notifications.scheduler import AttestationScheduler
from notifications.services.attestation.runner import build_orchestrator


STAGES = {
    "reminders": "process_reminders",
    "escalations": "process_escalations",
    "unregistered-reminders": "process_unregistered_reminders",
    "unregistered-escalations": "process_unregistered_escalations",
    "auto-close": "auto_close_expired_campaigns",
}


class Command(BaseCommand):
    help = "Send attestation reminders / escalations and close expired campaigns"

    def add_arguments(self, parser):
        parser.add_argument(
            "--stage",
            choices=sorted(STAGES) + ["all"],
            default="all",
            help="Run a single stage instead of the full pass",
        )
        parser.add_argument(
            "--serve",
            action="store_true",
            help="Run the recurring scheduler in the foreground",
        )

    def handle(self, *args, **options):
        if options["serve"]:
            return self._serve()

        now = timezone.now()
        self.stdout.write(
            self.style.NOTICE(
                f"[{now:%Y-%m-%d %H:%M:%S}] Starting attestation scheduler"
            )
        )

        orchestrator = build_orchestrator()
        stage = options["stage"]

        if stage == "all":
            results = orchestrator.run_all().stages
        else:
            results = {stage: getattr(orchestrator, STAGES[stage])()}

        failed = []
        for name, result in results.items():
            if result.success:
                self.stdout.write(self.style.SUCCESS(f"  {name}: {result.summary()}"))
            else:
                failed.append(name)
                self.stderr.write(self.style.ERROR(f"  {name}: {result.summary()}"))

        if failed:
            raise CommandError(f"Attestation stage(s) failed: {', '.join(failed)}")

        self.stdout.write(
            self.style.SUCCESS(
                f"[{timezone.now():%Y-%m-%d %H:%M:%S}] Attestation scheduler completed"
            )
        )

    def _serve(self):
        scheduler = AttestationScheduler()
        scheduler.start()
        self.stdout.write(self.style.NOTICE("Attestation scheduler running (Ctrl+C to stop)"))

        try:
            while scheduler.running:
                time.sleep(1)
        except KeyboardInterrupt:
            pass
        finally:
            scheduler.stop()
