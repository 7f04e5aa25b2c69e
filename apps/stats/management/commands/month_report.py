from django.contrib.auth.models import User
from django.core.management.base import BaseCommand, CommandError

from apps.clients.adapters.orm_repositories import DjangoClientRepository
from apps.core.dates import local_today
from apps.goals.adapters.orm_repositories import DjangoGoalPeriodRepository
from apps.stats.domain.entities import DayStatus
from apps.stats.domain.exceptions import InvalidRangeError
from apps.stats.services import build_grid_builder

STATUS_MARKS = {
    DayStatus.BELOW: '-',
    DayStatus.MET: '=',
    DayStatus.EXCEEDED: '+',
}


class Command(BaseCommand):
    help = 'Prints the month calendar: new clients / daily goal per day'

    def add_arguments(self, parser):
        parser.add_argument('phone_number', help="User phone number (login)")
        parser.add_argument('--year', type=int)
        parser.add_argument('--month', type=int)

    def handle(self, *args, **options):
        try:
            user = User.objects.get(username=options['phone_number'])
        except User.DoesNotExist:
            raise CommandError(f"User {options['phone_number']} does not exist")

        today = local_today()
        year = options['year'] if options['year'] is not None else today.year
        month = options['month'] if options['month'] is not None else today.month

        goal_repo = DjangoGoalPeriodRepository()
        builder = build_grid_builder()

        try:
            start, end = builder.grid_range(year, month)
            grid = builder.build_month_grid(
                year, month,
                DjangoClientRepository().list_created_between(user.id, start, end),
                goal_repo.get_default_goal(user.id),
                goal_repo.list_for_user(user.id)
            )
        except InvalidRangeError as e:
            raise CommandError(str(e))

        self.stdout.write(f"{year}-{month:02d}  (count/goal, '-' below, '=' met, '+' exceeded)")
        self.stdout.write("  ".join(f"{name:>8}" for name in ('Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat')))

        for week in grid.weeks:
            cells = []
            for cell in week:
                if cell.in_current_month:
                    cells.append(f"{cell.date.day:>2} {cell.count}/{cell.effective_goal}{STATUS_MARKS[cell.status]}".rjust(8))
                else:
                    cells.append(" " * 8)
            self.stdout.write("  ".join(cells))

        self.stdout.write(self.style.SUCCESS(f"Month total: {grid.month_total}"))
