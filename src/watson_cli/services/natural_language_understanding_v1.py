"""Natural Language Understanding v1 operations."""

from __future__ import annotations

from watson_cli.registry import (
    Endpoint,
    OperationSpec,
    ServiceSpec,
    boolean,
    integer,
    json_object,
    string,
)

OPERATIONS = (
    OperationSpec(
        "analyze",
        "Analyze text",
        Endpoint("POST", "/v1/analyze"),
        long_help=(
            "Analyzes text, HTML, or a public webpage for the following features:- Categories- "
            "Concepts- Emotion- Entities- Keywords- Metadata- Relations- Semantic roles- "
            "Sentiment- Syntax (Experimental)."
        ),
        flags=(
            json_object(
                "features",
                "Specific features to analyze the document for.",
                required=True,
            ),
            string(
                "text",
                (
                    "The plain text to analyze. One of the `text`, `html`, or `url` parameters is "
                    "required."
                ),
            ),
            string(
                "html",
                (
                    "The HTML file to analyze. One of the `text`, `html`, or `url` parameters is "
                    "required."
                ),
            ),
            string(
                "url",
                (
                    "The webpage to analyze. One of the `text`, `html`, or `url` parameters is "
                    "required."
                ),
            ),
            boolean("clean", "Set this to `false` to disable webpage cleaning."),
            string(
                "xpath",
                (
                    "An [XPath "
                    "query](https://cloud.ibm.com/docs/services/natural-language-understanding?topic=natural-language-understanding-analyzing-webpages#xpath) "
                    "to perform on `html` or `url` input."
                ),
            ),
            boolean("fallback_to_raw", "Whether to use raw HTML content if text cleaning fails."),
            boolean("return_analyzed_text", "Whether or not to return the analyzed text."),
            string(
                "language",
                (
                    "ISO 639-1 code that specifies the language of your text. This overrides "
                    "automatic language detection."
                ),
            ),
            integer(
                "limit_text_characters",
                "Sets the maximum number of characters that are processed by the service.",
            ),
        ),
    ),
    OperationSpec(
        "list-models",
        "List models",
        Endpoint("GET", "/v1/models"),
        long_help=(
            "Lists Watson Knowledge Studio [custom entities and relations "
            "models](https://cloud.ibm.com/docs/services/natural-language-understanding?topic=natural-language-understanding-customizing) "
            "that are deployed to your Natural Language Understanding service."
        ),
    ),
    OperationSpec(
        "delete-model",
        "Delete model",
        Endpoint("DELETE", "/v1/models/{model_id}"),
        long_help="Deletes a custom model.",
        flags=(
            string("model_id", "Model ID of the model to delete.", required=True),
        ),
    ),
)

SERVICE = ServiceSpec(
    id="natural-language-understanding-v1",
    aliases=("nlu-v1",),
    short_help="Parent command for Natural Language Understanding",
    long_help=(
        "Analyze various features of text content at scale. Provide text, raw HTML, or a public "
        "URL and IBM Watson Natural Language Understanding will give you results for the features "
        "you request."
    ),
    auth_key="natural_language_understanding",
    default_url="https://gateway.watsonplatform.net/natural-language-understanding/api",
    operations=OPERATIONS,
    versioned=True,
    confirm_running=True,
)
