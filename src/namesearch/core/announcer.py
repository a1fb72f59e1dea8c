"""Screen reader announcements for the suggestion panel."""

from dataclasses import dataclass

from namesearch.core.plural import plural_form


@dataclass(frozen=True)
class AnnouncementStrings:
    """Locale-specific text used to announce search results."""

    found_template: str  # receives {count} and {noun}
    noun_one: str
    noun_few: str
    noun_many: str
    navigation_hint: str
    nothing_found: str


ANNOUNCEMENTS: dict[str, AnnouncementStrings] = {
    "ru": AnnouncementStrings(
        found_template="Найдено {count} {noun}.",
        noun_one="совпадение",
        noun_few="совпадения",
        noun_many="совпадений",
        navigation_hint="Используйте стрелки для навигации.",
        nothing_found="Ничего не найдено.",
    ),
    # English has no "few" form; the few slot reuses the plural noun.
    "en": AnnouncementStrings(
        found_template="Found {count} {noun}.",
        noun_one="match",
        noun_few="matches",
        noun_many="matches",
        navigation_hint="Use the arrow keys to navigate.",
        nothing_found="Nothing found.",
    ),
}


def get_announcement_strings(locale: str) -> AnnouncementStrings:
    """Return the strings for ``locale``, falling back to Russian."""
    return ANNOUNCEMENTS.get(locale, ANNOUNCEMENTS["ru"])


def announce(
    match_count: int,
    committed_query: str,
    show_container: bool,
    has_no_results: bool,
    strings: AnnouncementStrings = ANNOUNCEMENTS["ru"],
) -> str:
    """
    Build the live-region text describing the current results.

    Returns an empty string while the panel is hidden or the committed query
    is blank, the result count plus a navigation hint when there are matches,
    and the "nothing found" text when the query matched nothing.
    """
    if not show_container or not committed_query.strip():
        return ""
    if match_count > 0:
        noun = plural_form(match_count, strings.noun_one, strings.noun_few, strings.noun_many)
        found = strings.found_template.format(count=match_count, noun=noun)
        return f"{found} {strings.navigation_hint}"
    if has_no_results:
        return strings.nothing_found
    return ""
