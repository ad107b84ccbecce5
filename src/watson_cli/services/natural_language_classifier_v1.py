"""Natural Language Classifier v1 operations."""

from __future__ import annotations

from watson_cli.registry import (
    Endpoint,
    OperationSpec,
    ReturnKind,
    ServiceSpec,
    file_path,
    json_array,
    string,
)

OPERATIONS = (
    OperationSpec(
        "classify",
        "Classify a phrase",
        Endpoint("POST", "/v1/classifiers/{classifier_id}/classify"),
        long_help=(
            "Returns label information for the input. The status must be `Available` before you "
            "can use the classifier to classify text."
        ),
        flags=(
            string("classifier_id", "Classifier ID to use.", required=True),
            string(
                "text",
                "The submitted phrase. The maximum length is 2048 characters.",
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "classify-collection",
        "Classify multiple phrases",
        Endpoint("POST", "/v1/classifiers/{classifier_id}/classify_collection"),
        long_help=(
            "Returns label information for multiple phrases. The status must be `Available` "
            "before you can use the classifier to classify text.Note that classifying Japanese "
            "texts is a beta feature."
        ),
        flags=(
            string("classifier_id", "Classifier ID to use.", required=True),
            json_array("collection", "The submitted phrases.", required=True),
        ),
    ),
    OperationSpec(
        "create-classifier",
        "Create classifier",
        Endpoint("POST", "/v1/classifiers"),
        long_help=(
            "Sends data to create and train a classifier and returns information about the new "
            "classifier."
        ),
        flags=(
            file_path("training_metadata", "Metadata in JSON format.", required=True),
            file_path(
                "training_data",
                "Training data in CSV format. Each text value must have at least one class.",
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "list-classifiers",
        "List classifiers",
        Endpoint("GET", "/v1/classifiers"),
        long_help="Returns an empty array if no classifiers are available.",
    ),
    OperationSpec(
        "get-classifier",
        "Get information about a classifier",
        Endpoint("GET", "/v1/classifiers/{classifier_id}"),
        long_help="Returns status and other information about a classifier.",
        flags=(
            string("classifier_id", "Classifier ID to query.", required=True),
        ),
    ),
    OperationSpec(
        "delete-classifier",
        "Delete classifier",
        Endpoint("DELETE", "/v1/classifiers/{classifier_id}"),
        flags=(
            string("classifier_id", "Classifier ID to delete.", required=True),
        ),
        returns=ReturnKind.ACK,
    ),
)

SERVICE = ServiceSpec(
    id="natural-language-classifier-v1",
    aliases=("nlc-v1",),
    short_help="Parent command for Natural Language Classifier",
    long_help=(
        "IBM Watson&trade; Natural Language Classifier uses machine learning algorithms to return "
        "the top matching predefined classes for short text input. You create and train a "
        "classifier to connect predefined classes to example texts so that the service can apply "
        "those classes to new inputs."
    ),
    auth_key="natural_language_classifier",
    default_url="https://gateway.watsonplatform.net/natural-language-classifier/api",
    operations=OPERATIONS,
)
