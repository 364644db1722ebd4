"""End-to-end tests for vote endpoints."""

from uuid import uuid4

import pytest

from bazaar.domain.value import PostKind, UserRole
from tests.conftest import auth_headers, make_post, make_user


class TestCastVoteEndpoint:
    """End-to-end tests for POST /{resource}/{id}/vote."""

    def test_vote_sequence_on_trade(self, client, seed):
        """up, up, down, up walks through every transition."""
        # Arrange
        seller, buyer = make_user("seller"), make_user("buyer")
        post = make_post(seller)
        seed(post)
        url = f"/trades/{post.id}/vote"
        headers = auth_headers(buyer)

        # Act
        states = [
            client.post(url, json={"voteType": vote}, headers=headers).json()
            for vote in ("up", "up", "down", "up")
        ]

        # Assert
        assert states == [
            {"upvotes": 1, "downvotes": 0, "userVote": "up"},
            {"upvotes": 0, "downvotes": 0, "userVote": None},
            {"upvotes": 0, "downvotes": 1, "userVote": "down"},
            {"upvotes": 1, "downvotes": 0, "userVote": "up"},
        ]

    def test_forum_vote_via_cookie(self, client, seed):
        """The auth cookie works when no header is sent."""
        # Arrange
        post = make_post(make_user("author"), kind=PostKind.FORUM, title="Meetup?")
        seed(post)
        token = auth_headers(make_user("reader"))["Authorization"].removeprefix(
            "Bearer "
        )

        # Act
        response = client.post(
            f"/forum/posts/{post.id}/vote",
            json={"voteType": "down"},
            headers={"Cookie": f"auth_token={token}"},
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["downvotes"] == 1

    def test_unauthenticated_vote_is_401(self, client, seed):
        post = make_post(make_user("seller"))
        seed(post)

        response = client.post(f"/trades/{post.id}/vote", json={"voteType": "up"})

        assert response.status_code == 401
        assert response.json()["code"] == "unauthenticated"

    def test_self_vote_is_403(self, client, seed):
        seller = make_user("seller")
        post = make_post(seller)
        seed(post)

        response = client.post(
            f"/trades/{post.id}/vote", json={"voteType": "up"}, headers=auth_headers(seller)
        )

        assert response.status_code == 403
        assert response.json()["code"] == "forbidden"

    def test_banned_voter_is_403(self, client, seed):
        post = make_post(make_user("seller"))
        seed(post)

        response = client.post(
            f"/trades/{post.id}/vote",
            json={"voteType": "up"},
            headers=auth_headers(make_user("spammer", role=UserRole.BANNED)),
        )

        assert response.status_code == 403

    @pytest.mark.parametrize("body", [{"voteType": "sideways"}, {}, {"voteType": 3}])
    def test_bad_vote_type_is_400(self, client, seed, body):
        post = make_post(make_user("seller"))
        seed(post)

        response = client.post(
            f"/trades/{post.id}/vote", json=body, headers=auth_headers(make_user())
        )

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_argument"

    @pytest.mark.parametrize("post_id", ["not-a-uuid", str(uuid4())])
    def test_missing_post_is_404(self, client, post_id):
        response = client.post(
            f"/trades/{post_id}/vote",
            json={"voteType": "up"},
            headers=auth_headers(make_user()),
        )

        assert response.status_code == 404
        assert response.json()["code"] == "not_found"

    def test_trade_id_is_not_a_forum_post(self, client, seed):
        """Post kinds do not share ids."""
        post = make_post(make_user("seller"))
        seed(post)

        response = client.post(
            f"/forum/posts/{post.id}/vote",
            json={"voteType": "up"},
            headers=auth_headers(make_user()),
        )

        assert response.status_code == 404


class TestGetVotesEndpoint:
    """End-to-end tests for GET /{resource}/{id}/votes."""

    def test_anonymous_and_signed_in_reads(self, client, seed):
        # Arrange
        post = make_post(make_user("seller"), upvotes=0, downvotes=0)
        seed(post)
        voter = make_user("buyer")
        client.post(
            f"/trades/{post.id}/vote", json={"voteType": "up"}, headers=auth_headers(voter)
        )

        # Act
        anonymous = client.get(f"/trades/{post.id}/votes")
        own = client.get(f"/trades/{post.id}/votes", headers=auth_headers(voter))
        bad_token = client.get(
            f"/trades/{post.id}/votes", headers={"Authorization": "Bearer junk"}
        )

        # Assert
        assert anonymous.json() == {"upvotes": 1, "downvotes": 0, "userVote": None}
        assert own.json()["userVote"] == "up"
        assert bad_token.status_code == 200
        assert bad_token.json()["userVote"] is None


class TestRecountEndpoint:
    """End-to-end tests for POST /{resource}/{id}/votes/recount."""

    def test_moderator_recount(self, client, seed):
        # Arrange
        post = make_post(make_user("seller"), upvotes=9, downvotes=4)
        seed(post)
        moderator = make_user("mod", role=UserRole.MODERATOR)

        # Act
        forbidden = client.post(
            f"/trades/{post.id}/votes/recount", headers=auth_headers(make_user())
        )
        response = client.post(
            f"/trades/{post.id}/votes/recount", headers=auth_headers(moderator)
        )

        # Assert
        assert forbidden.status_code == 403
        assert response.status_code == 200
        assert response.json() == {"upvotes": 0, "downvotes": 0, "userVote": None}
