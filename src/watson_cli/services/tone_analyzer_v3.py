"""Tone Analyzer v3 operations."""

from __future__ import annotations

from watson_cli.registry import (
    Endpoint,
    Location,
    OperationSpec,
    ServiceSpec,
    boolean,
    json_array,
    json_object,
    string,
    strings,
)

OPERATIONS = (
    OperationSpec(
        "tone",
        "Analyze general tone",
        Endpoint("POST", "/v3/tone"),
        long_help=(
            "Use the general-purpose endpoint to analyze the tone of your input content. The "
            "service analyzes the content for emotional and language tones. The method always "
            "analyzes the tone of the full document; by default, it also analyzes the tone of "
            "each individual sentence of the content."
        ),
        flags=(
            json_object(
                "tone_input",
                "JSON, plain text, or HTML input that contains the content to be analyzed.",
                location=Location.RAW,
                media_type="application/json",
            ),
            string(
                "body",
                "JSON, plain text, or HTML input that contains the content to be analyzed.",
                location=Location.RAW,
                media_type="text/plain",
            ),
            string(
                "content_type",
                (
                    "The type of the input. A character encoding can be specified by including a "
                    "`charset` parameter."
                ),
                location=Location.HEADER,
                wire="Content-Type",
            ),
            boolean(
                "sentences",
                (
                    "Indicates whether the service is to return an analysis of each individual "
                    "sentence in addition to its analysis of the full document."
                ),
                location=Location.QUERY,
            ),
            strings("tones", "**`2017-09-21`:** Deprecated.", location=Location.QUERY),
            string(
                "content_language",
                "The language of the input text for the request: English or French.",
                location=Location.HEADER,
                wire="Content-Language",
            ),
            string(
                "accept_language",
                "The desired language of the response.",
                location=Location.HEADER,
                wire="Accept-Language",
            ),
        ),
    ),
    OperationSpec(
        "tone-chat",
        "Analyze customer-engagement tone",
        Endpoint("POST", "/v3/tone_chat"),
        long_help=(
            "Use the customer-engagement endpoint to analyze the tone of customer service and "
            "customer support conversations. For each utterance of a conversation, the method "
            "reports the most prevalent subset of the following seven tones: sad, frustrated, "
            "satisfied, excited, polite, impolite, and sympathetic."
        ),
        flags=(
            json_array(
                "utterances",
                (
                    "An array of `Utterance` objects that provides the input content that the "
                    "service is to analyze."
                ),
                required=True,
            ),
            string(
                "content_language",
                "The language of the input text for the request: English or French.",
                location=Location.HEADER,
                wire="Content-Language",
            ),
            string(
                "accept_language",
                "The desired language of the response.",
                location=Location.HEADER,
                wire="Accept-Language",
            ),
        ),
    ),
)

SERVICE = ServiceSpec(
    id="tone-analyzer-v3",
    aliases=("ta-v3",),
    short_help="Parent command for Tone Analyzer",
    long_help=(
        "The IBM Watson&trade; Tone Analyzer service uses linguistic analysis to detect emotional "
        "and language tones in written text. The service can analyze tone at both the document "
        "and sentence levels."
    ),
    auth_key="tone_analyzer",
    default_url="https://gateway.watsonplatform.net/tone-analyzer/api",
    operations=OPERATIONS,
    versioned=True,
)
