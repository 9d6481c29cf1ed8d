from bson import ObjectId

from todo_api.models import todo as todos
from todo_api.models import user as users
from seed import test_todos, test_users


def test_apply_completion_sets_timestamp():
    changes = todos.apply_completion({"completed": True})
    assert isinstance(changes["completedAt"], int)
    assert changes["completedAt"] > 0


def test_apply_completion_resets():
    assert todos.apply_completion({"text": "x"}) == {
        "text": "x", "completed": False, "completedAt": None,
    }
    assert todos.apply_completion({"completed": False})["completedAt"] is None


def test_update_todo_missing(db):
    assert todos.update_todo(db, str(ObjectId()), {"completed": True}) is None


def test_get_todo(db):
    assert todos.get_todo(db, str(test_todos[0]["_id"]))["text"] == "First dummy todo"


def test_find_by_token_matches_auth_tokens_only(db):
    user = db["users"].find_one({"_id": test_users[1]["_id"]})
    token = users.generate_auth_token(db, user)
    db["users"].update_one(
        {"_id": user["_id"], "tokens.token": token},
        {"$set": {"tokens.$.access": "reset"}},
    )

    assert users.find_by_token(db, token) is None


def test_find_by_token(db):
    user = db["users"].find_one({"_id": test_users[1]["_id"]})
    token = users.generate_auth_token(db, user)

    found = users.find_by_token(db, token)
    assert found["_id"] == user["_id"]


def test_find_by_credentials(db):
    assert users.find_by_credentials(db, "eric@example.com", "SecondPassword")["_id"] == test_users[1]["_id"]
    assert users.find_by_credentials(db, "eric@example.com", "nope") is None
    assert users.find_by_credentials(db, "nobody@example.com", "SecondPassword") is None


def test_to_public_hides_secrets(db):
    user = db["users"].find_one({"_id": test_users[0]["_id"]})
    assert set(users.to_public(user)) == {"_id", "email"}
