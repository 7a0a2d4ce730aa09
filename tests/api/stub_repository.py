"""Recording ExhibitRepository stub for route tests that must not touch a store."""

from museum_api.schemas.exhibit import ItemOut, QuizOut, ThemeOut


class StubRepository:
    """In-memory ExhibitRepository.

    - calls: list of (method, args) for every repository call
    - fail_with: when set, every call raises it (after being recorded)
    - forbid_calls: when True, any call fails the test
    """

    def __init__(self):
        self.calls: list[tuple[str, tuple]] = []
        self.themes: list[ThemeOut] = []
        self.items: dict[str, list[ItemOut]] = {}
        self.quizzes: dict[str, list[QuizOut]] = {}
        self.recipients: list[tuple[str, str]] = []
        self.fail_with: Exception | None = None
        self.forbid_calls = False

    def _record(self, method: str, *args) -> None:
        if self.forbid_calls:
            raise AssertionError(f"repository.{method} must not be called")
        self.calls.append((method, args))
        if self.fail_with is not None:
            raise self.fail_with

    async def get_all_themes(self) -> list[ThemeOut]:
        self._record("get_all_themes")
        return list(self.themes)

    async def get_items_by_theme(self, theme_id: str) -> list[ItemOut]:
        self._record("get_items_by_theme", theme_id)
        return list(self.items.get(theme_id, []))

    async def get_quizzes_by_theme(self, theme_id: str) -> list[QuizOut]:
        self._record("get_quizzes_by_theme", theme_id)
        return list(self.quizzes.get(theme_id, []))

    async def add_recipient(self, theme_id: str, email: str) -> None:
        self._record("add_recipient", theme_id, email)
        self.recipients.append((theme_id, email))

    async def get_item_by_seq(self, item_seq: int) -> ItemOut | None:
        self._record("get_item_by_seq", item_seq)
        for items in self.items.values():
            for item in items:
                if item.item_seq == item_seq:
                    return item
        return None
