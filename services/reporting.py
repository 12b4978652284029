from __future__ import annotations

from typing import List

from models import CompanyTopUp, CreditLine, TopUpRun


def _user_lines(line: CreditLine) -> List[str]:
    user = line.user
    return [
        f"\t\t{user.last_name}, {user.first_name}, {user.email}",
        f"\t\t  Previous Token Balance, {line.previous_tokens}",
        f"\t\t  New Token Balance {line.new_tokens}",
    ]


def _company_lines(top_up: CompanyTopUp) -> List[str]:
    company = top_up.company
    out = [
        f"\tCompany Id: {company.id}",
        f"\tCompany Name: {company.name}",
        "\tUsers Emailed:",
    ]
    for line in top_up.emailed:
        out.extend(_user_lines(line))
    out.append("\tUsers Not Emailed:")
    for line in top_up.not_emailed:
        out.extend(_user_lines(line))
    out.append(f"\t\tTotal amount of top ups for {company.name}: {top_up.total}")
    out.append("")
    return out


def render_report(run: TopUpRun) -> str:
    """Render a committed top-up run as the operator report.

    Starts with a blank line; each company section ends with a blank line.
    """
    lines = [""]
    for top_up in run.companies:
        lines.extend(_company_lines(top_up))
    return "\n".join(lines) + "\n"


def print_report(run: TopUpRun) -> None:
    print(render_report(run), end="")
