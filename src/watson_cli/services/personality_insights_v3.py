"""Personality Insights v3 operations."""

from __future__ import annotations

from watson_cli.registry import (
    Endpoint,
    Location,
    OperationSpec,
    ReturnKind,
    ServiceSpec,
    boolean,
    json_object,
    string,
)

OPERATIONS = (
    OperationSpec(
        "profile",
        "Get profile",
        Endpoint("POST", "/v3/profile"),
        long_help=(
            "Generates a personality profile for the author of the input text. The service "
            "accepts a maximum of 20 MB of input content, but it requires much less text to "
            "produce an accurate profile. The service can analyze text in Arabic, English, "
            "Japanese, Korean, or Spanish. It can return its results in a variety of languages."
        ),
        flags=(
            json_object(
                "content",
                (
                    "A maximum of 20 MB of content to analyze, though the service requires much "
                    "less text; for more information, see [Providing sufficient "
                    "input](https://cloud.ibm.com/docs/services/personality-insights?topic=personality-insights-input#sufficient)."
                ),
                location=Location.RAW,
                media_type="application/json",
            ),
            string(
                "body",
                (
                    "A maximum of 20 MB of content to analyze, though the service requires much "
                    "less text; for more information, see [Providing sufficient "
                    "input](https://cloud.ibm.com/docs/services/personality-insights?topic=personality-insights-input#sufficient)."
                ),
                location=Location.RAW,
                media_type="text/plain",
            ),
            string(
                "content_type",
                (
                    "The type of the input. For more information, see **Content types** in the "
                    "method description."
                ),
                location=Location.HEADER,
                wire="Content-Type",
            ),
            string(
                "content_language",
                (
                    "The language of the input text for the request: Arabic, English, Japanese, "
                    "Korean, or Spanish."
                ),
                location=Location.HEADER,
                wire="Content-Language",
            ),
            string(
                "accept_language",
                "The desired language of the response.",
                location=Location.HEADER,
                wire="Accept-Language",
            ),
            boolean(
                "raw_scores",
                (
                    "Indicates whether a raw score in addition to a normalized percentile is "
                    "returned for each characteristic; raw scores are not compared with a sample "
                    "population."
                ),
                location=Location.QUERY,
            ),
            boolean(
                "csv_headers",
                (
                    "Indicates whether column labels are returned with a CSV response. By "
                    "default, no column labels are returned."
                ),
                location=Location.QUERY,
            ),
            boolean(
                "consumption_preferences",
                "Indicates whether consumption preferences are returned with the results.",
                location=Location.QUERY,
            ),
        ),
    ),
    OperationSpec(
        "profile-as-csv",
        "Get profile as csv",
        Endpoint("POST", "/v3/profile", headers=(("Accept", "text/csv"),)),
        long_help=(
            "Generates a personality profile for the author of the input text. The service "
            "accepts a maximum of 20 MB of input content, but it requires much less text to "
            "produce an accurate profile. The service can analyze text in Arabic, English, "
            "Japanese, Korean, or Spanish. It can return its results in a variety of languages."
        ),
        flags=(
            json_object(
                "content",
                (
                    "A maximum of 20 MB of content to analyze, though the service requires much "
                    "less text; for more information, see [Providing sufficient "
                    "input](https://cloud.ibm.com/docs/services/personality-insights?topic=personality-insights-input#sufficient)."
                ),
                location=Location.RAW,
                media_type="application/json",
            ),
            string(
                "body",
                (
                    "A maximum of 20 MB of content to analyze, though the service requires much "
                    "less text; for more information, see [Providing sufficient "
                    "input](https://cloud.ibm.com/docs/services/personality-insights?topic=personality-insights-input#sufficient)."
                ),
                location=Location.RAW,
                media_type="text/plain",
            ),
            string(
                "content_type",
                (
                    "The type of the input. For more information, see **Content types** in the "
                    "method description."
                ),
                location=Location.HEADER,
                wire="Content-Type",
            ),
            string(
                "content_language",
                (
                    "The language of the input text for the request: Arabic, English, Japanese, "
                    "Korean, or Spanish."
                ),
                location=Location.HEADER,
                wire="Content-Language",
            ),
            string(
                "accept_language",
                "The desired language of the response.",
                location=Location.HEADER,
                wire="Accept-Language",
            ),
            boolean(
                "raw_scores",
                (
                    "Indicates whether a raw score in addition to a normalized percentile is "
                    "returned for each characteristic; raw scores are not compared with a sample "
                    "population."
                ),
                location=Location.QUERY,
            ),
            boolean(
                "csv_headers",
                (
                    "Indicates whether column labels are returned with a CSV response. By "
                    "default, no column labels are returned."
                ),
                location=Location.QUERY,
            ),
            boolean(
                "consumption_preferences",
                "Indicates whether consumption preferences are returned with the results.",
                location=Location.QUERY,
            ),
        ),
        returns=ReturnKind.STREAM,
    ),
)

SERVICE = ServiceSpec(
    id="personality-insights-v3",
    aliases=("pi-v3",),
    short_help="Parent command for Personality Insights",
    long_help=(
        "The IBM Watson&trade; Personality Insights service enables applications to derive "
        "insights from social media, enterprise data, or other digital communications."
    ),
    auth_key="personality_insights",
    default_url="https://gateway.watsonplatform.net/personality-insights/api",
    operations=OPERATIONS,
    versioned=True,
)
