from django.core.management.base import BaseCommand
from django.utils import timezone

from worldid.models import VerificationSession


class Command(BaseCommand):
    help = """
    Delete World ID verification sessions that have expired without being verified.
    Verified sessions are kept, together with the nullifier records they are the
    audit trail of the verification.
    """

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Only print the number of sessions that would be deleted",
        )

    def handle(self, *args, **options):
        now = timezone.now()
        query = VerificationSession.expired(now)

        if options["dry_run"]:
            self.stdout.write(
                f"{query.count()} expired VerificationSession objects would be deleted"
            )
            return

        delete_count, _ = query.delete()
        self.stdout.write(
            self.style.SUCCESS(
                f"{delete_count} expired VerificationSession objects have been deleted"
            )
        )
