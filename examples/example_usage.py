"""Example: use the service layer directly (without Flask).

Goal: show that controllers are a thin layer and payroll logic lives in services.
"""

from datetime import datetime

from src.shift_payroll.shift_payroll.container import build_container
from src.shift_payroll.shift_payroll.demo import seed_demo_data


def main():
    now = datetime(2025, 2, 10, 12, 0)
    container = build_container()
    employee_id = seed_demo_data(container, now=now)

    for summary in container.payroll_report_service.monthly_summaries(employee_id, now=now):
        print(summary.period_key, summary.total_pay, summary.total_transport, summary.days_worked)
    print(container.payroll_report_service.yearly_progress(employee_id, now=now).to_dict())


if __name__ == "__main__":
    main()
