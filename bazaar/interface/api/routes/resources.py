"""URL prefix of each post kind."""

from bazaar.domain.value import PostKind

RESOURCE_PREFIXES: dict[PostKind, str] = {
    PostKind.TRADE: "/trades",
    PostKind.FORUM: "/forum/posts",
}
