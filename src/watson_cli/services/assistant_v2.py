"""Watson Assistant v2 runtime operations."""

from __future__ import annotations

from watson_cli.registry import (
    Endpoint,
    OperationSpec,
    ReturnKind,
    ServiceSpec,
    json_object,
    string,
)

OPERATIONS = (
    OperationSpec(
        "create-session",
        "Create a session",
        Endpoint("POST", "/v2/assistants/{assistant_id}/sessions"),
        long_help=(
            "Create a new session. A session is used to send user input to a skill and receive "
            "responses. It also maintains the state of the conversation."
        ),
        flags=(
            string("assistant_id", "Unique identifier of the assistant.", required=True),
        ),
    ),
    OperationSpec(
        "delete-session",
        "Delete session",
        Endpoint("DELETE", "/v2/assistants/{assistant_id}/sessions/{session_id}"),
        long_help="Deletes a session explicitly before it times out.",
        flags=(
            string("assistant_id", "Unique identifier of the assistant.", required=True),
            string("session_id", "Unique identifier of the session.", required=True),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "message",
        "Send user input to assistant",
        Endpoint("POST", "/v2/assistants/{assistant_id}/sessions/{session_id}/message"),
        long_help=(
            "Send user input to an assistant and receive a response.There is no rate limit for "
            "this operation."
        ),
        flags=(
            string("assistant_id", "Unique identifier of the assistant.", required=True),
            string("session_id", "Unique identifier of the session.", required=True),
            json_object("input", "An input object that includes the input text."),
            json_object(
                "context",
                (
                    "State information for the conversation. The context is stored by the "
                    "assistant on a per-session basis."
                ),
            ),
        ),
    ),
)

SERVICE = ServiceSpec(
    id="assistant-v2",
    short_help="Parent command for Watson Assistant v2",
    long_help=(
        "The IBM Watson&trade; Assistant service combines machine learning, natural language "
        "understanding, and an integrated dialog editor to create conversation flows between your "
        "apps and your users.The Assistant v2 API provides runtime methods your client "
        "application can use to send user input to an assistant and receive a response."
    ),
    auth_key="assistant_v2",
    default_url="https://gateway.watsonplatform.net/assistant/api",
    operations=OPERATIONS,
    versioned=True,
    confirm_running=True,
)
