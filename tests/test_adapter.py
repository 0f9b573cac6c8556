from __future__ import annotations

from entities import Article, ArticleTranslation, PageTranslation
from translatable.adapter.orm import TranslatableORMAdapter
from translatable.config import Settings
from translatable.entity.translation import Translation
from translatable.mapping.identity_cache import NullIdentityCache, SessionIdentityCache
from translatable.mapping.wrapper import EntityWrapper, class_name

ARTICLE = class_name(Article)


def test_default_translation_class(adapter) -> None:  # noqa: ANN001
    assert adapter.get_default_translation_class() is Translation


def test_uses_personal_translation(adapter) -> None:  # noqa: ANN001
    assert adapter.uses_personal_translation(PageTranslation)
    assert not adapter.uses_personal_translation(ArticleTranslation)
    assert not adapter.uses_personal_translation(Translation)


def test_identity_cache_follows_settings(session) -> None:  # noqa: ANN001
    enabled = TranslatableORMAdapter(session, settings=Settings(_env_file=None))
    disabled = TranslatableORMAdapter(
        session, settings=Settings(_env_file=None, identity_map_lookup=False)
    )
    assert isinstance(enabled.finder.cache, SessionIdentityCache)
    assert isinstance(disabled.finder.cache, NullIdentityCache)


def test_disabled_identity_cache_always_queries(session, statements) -> None:  # noqa: ANN001
    adapter = TranslatableORMAdapter(
        session, settings=Settings(_env_file=None, identity_map_lookup=False)
    )
    article = Article(id=42, title="Hello")
    trans = ArticleTranslation(
        locale="fr", field="title", object_class=ARTICLE, foreign_key=42, content="Salut"
    )
    session.add_all([article, trans])
    session.flush()

    statements.start()
    assert adapter.find_translation(article, "fr", "title", ArticleTranslation, ARTICLE) is trans
    assert statements.count == 1


def test_default_translation_table_round_trip(adapter, session) -> None:  # noqa: ANN001
    article = Article(id=7, title="Hello")
    session.add(article)
    session.flush()
    wrapped = EntityWrapper.wrap(article, session)

    adapter.insert_translation_record(
        Translation(locale="fr", field="title", object_class=ARTICLE, foreign_key="7", content="Bonjour")
    )
    found = adapter.find_translation(wrapped, "fr", "title", Translation)
    assert found.content == "Bonjour"
    assert adapter.load_translations(article, Translation, "fr")[0].content == "Bonjour"
    assert adapter.remove_associated_translations(wrapped, Translation) == 1
    assert adapter.find_translation(wrapped, "fr", "title", Translation) is None
