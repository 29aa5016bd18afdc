"""HTML rendering of the lookup page."""

# pylint: disable=missing-function-docstring

import html
from typing import Optional
from urllib.parse import urlparse

from leak_checker.core.outcomes import (
    ApiError,
    BreachRecord,
    Breaches,
    LookupOutcome,
    NoBreaches,
    ValidationError,
)

PAGE_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width,initial-scale=1">
  <title>LeakChecker</title>
  <script src="https://cdn.tailwindcss.com"></script>
  <meta name="robots" content="noindex">
</head>
<body class="min-h-screen bg-slate-950 text-slate-100">
  <main class="max-w-3xl mx-auto px-4 py-10">
    <header class="mb-8">
      <h1 class="text-3xl font-bold tracking-tight">LeakChecker</h1>
      <p class="text-slate-400 mt-2">Check whether an email address appears in known public data breaches.</p>
    </header>
{form}
{result}
    <footer class="mt-10 text-center text-xs text-slate-600">
      <p>Remember to rotate passwords regularly and enable multi-factor authentication.</p>
    </footer>
  </main>
</body>
</html>
"""

FORM_TEMPLATE = """    <section class="bg-slate-900/60 border border-slate-800 rounded-2xl p-5">
      <form method="POST" class="flex flex-col gap-4">
        <label class="text-sm text-slate-300" for="email">Email address</label>
        <div class="flex gap-3 flex-col sm:flex-row">
          <input id="email" name="email" type="email" required value="{value}"
            placeholder="name@example.com"
            class="w-full rounded-xl border border-slate-800 bg-slate-900 px-4 py-3" />
          <button type="submit" class="shrink-0 rounded-xl bg-indigo-600 px-5 py-3 font-semibold">Check</button>
        </div>
        <p class="text-xs text-slate-500">Your email is sent only to the Have I Been Pwned API to perform the lookup. No data is stored server-side.</p>
      </form>
    </section>"""

ERROR_TEMPLATE = """    <div class="mt-6 rounded-xl border border-red-900/40 bg-red-950/40 p-4">
      <div class="font-semibold text-red-300">Error</div>
      <div class="text-sm text-red-200 mt-1">{message}</div>
    </div>"""

NO_BREACHES_PANEL = """    <section class="mt-6">
      <div class="rounded-xl border border-emerald-900/40 bg-emerald-950/40 p-4">
        <div class="font-semibold text-emerald-300">No breaches found</div>
        <p class="text-sm text-emerald-200 mt-1">This email does not appear in the breach database.</p>
      </div>
    </section>"""

BREACHES_TEMPLATE = """    <section class="mt-6">
      <div class="mb-3">
        <h2 class="text-xl font-semibold">Breaches found</h2>
        <p class="text-slate-400 text-sm">{summary}</p>
      </div>
      <div class="grid gap-4">
{cards}
      </div>
    </section>"""

CARD_TEMPLATE = """        <article class="rounded-2xl border border-slate-800 bg-slate-900/60 p-4">
          <div class="flex items-start justify-between gap-3">
            <div>
              <h3 class="text-lg font-semibold">{title}</h3>{domain}
            </div>{logo}
          </div>
          <dl class="mt-3 grid grid-cols-1 sm:grid-cols-3 gap-3 text-sm">
            <div><dt class="text-slate-400">Breach date</dt><dd class="text-slate-200">{breach_date}</dd></div>
            <div><dt class="text-slate-400">Records</dt><dd class="text-slate-200">{pwn_count}</dd></div>
            <div><dt class="text-slate-400">Verified</dt><dd class="text-slate-200">{verified}</dd></div>
          </dl>{data_classes}{description}
        </article>"""


def escape(value: Optional[str]) -> str:
    return html.escape(value or "", quote=True)


def safe_logo_url(url: Optional[str]) -> Optional[str]:
    """Return the URL only if it uses an http(s) scheme."""
    if not url:
        return None

    scheme = urlparse(url).scheme.lower()
    if scheme not in ("http", "https"):
        return None

    return url


def render_description(description: str) -> str:
    """
    Render an upstream breach description.

    Descriptions contain HTML from the breach API and are treated as
    untrusted: the markup is escaped and shown as text.
    """
    return escape(description)


def format_count(count: int) -> str:
    return f"{count:,}"


def render_card(record: BreachRecord) -> str:
    domain = ""
    if record.domain:
        domain = (
            '\n              <div class="text-slate-400 text-sm">'
            f"{escape(record.domain)}</div>"
        )

    logo = ""
    logo_url = safe_logo_url(record.logo_path)
    if logo_url:
        logo = (
            f'\n            <img src="{escape(logo_url)}" alt="" '
            'class="h-8 w-8 rounded-md object-cover" loading="lazy" />'
        )

    data_classes = ""
    if record.data_classes:
        chips = "".join(
            '<span class="rounded-full border border-slate-800 bg-slate-900 '
            f'px-2.5 py-1 text-xs text-slate-200">{escape(dc)}</span>'
            for dc in record.data_classes
        )
        data_classes = (
            '\n          <div class="mt-3"><div class="text-slate-400 text-sm mb-1">'
            f'Exposed data</div><div class="flex flex-wrap gap-2">{chips}</div></div>'
        )

    description = ""
    if record.description:
        description = (
            '\n          <details class="mt-3"><summary class="cursor-pointer text-sm">'
            'Description</summary><div class="text-sm text-slate-200 mt-2">'
            f"{render_description(record.description)}</div></details>"
        )

    return CARD_TEMPLATE.format(
        title=escape(record.display_title),
        domain=domain,
        logo=logo,
        breach_date=escape(record.breach_date),
        pwn_count=format_count(record.pwn_count),
        verified="Yes" if record.is_verified else "No",
        data_classes=data_classes,
        description=description,
    )


def render_result(outcome: Optional[LookupOutcome]) -> str:
    if outcome is None:
        return ""

    if isinstance(outcome, (ValidationError, ApiError)):
        return ERROR_TEMPLATE.format(message=escape(outcome.message))

    if isinstance(outcome, NoBreaches):
        return NO_BREACHES_PANEL

    if isinstance(outcome, Breaches):
        count = len(outcome)
        noun = "breach" if count == 1 else "breaches"
        summary = (
            f"Found in {count} {noun} "
            f"({format_count(outcome.total_pwn_count)} accounts exposed in total)."
        )
        cards = "\n".join(render_card(record) for record in outcome.records)
        return BREACHES_TEMPLATE.format(summary=summary, cards=cards)

    raise TypeError(f"Unknown lookup outcome: {type(outcome).__name__}")


def render_page(
    submitted: Optional[str] = None,
    outcome: Optional[LookupOutcome] = None,
) -> str:
    """
    Render the full lookup page.

    Args:
        submitted: Text the user submitted, echoed back into the form
        outcome: Result of the lookup, None for a blank page

    Returns:
        The HTML document
    """
    form = FORM_TEMPLATE.format(value=escape((submitted or "").strip()))

    return PAGE_TEMPLATE.format(form=form, result=render_result(outcome))
