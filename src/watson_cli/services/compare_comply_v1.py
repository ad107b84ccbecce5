"""Compare and Comply v1 operations."""

from __future__ import annotations

from watson_cli.registry import (
    Endpoint,
    Location,
    OperationSpec,
    ServiceSpec,
    boolean,
    file_path,
    integer,
    json_object,
    string,
)

OPERATIONS = (
    OperationSpec(
        "convert-to-html",
        "Convert document to HTML",
        Endpoint("POST", "/v1/html_conversion"),
        long_help="Converts a document to HTML.",
        flags=(
            file_path("file", "The document to convert.", required=True),
            string(
                "file_content_type",
                "The content type of File.",
                location=Location.CONTENT_TYPE,
                wire="file",
            ),
            string(
                "model",
                "The analysis model to be used by the service.",
                location=Location.QUERY,
            ),
        ),
    ),
    OperationSpec(
        "classify-elements",
        "Classify the elements of a document",
        Endpoint("POST", "/v1/element_classification"),
        long_help="Analyzes the structural and semantic elements of a document.",
        flags=(
            file_path("file", "The document to classify.", required=True),
            string(
                "file_content_type",
                "The content type of File.",
                location=Location.CONTENT_TYPE,
                wire="file",
            ),
            string(
                "model",
                "The analysis model to be used by the service.",
                location=Location.QUERY,
            ),
        ),
    ),
    OperationSpec(
        "extract-tables",
        "Extract a document's tables",
        Endpoint("POST", "/v1/tables"),
        long_help="Analyzes the tables in a document.",
        flags=(
            file_path("file", "The document on which to run table extraction.", required=True),
            string(
                "file_content_type",
                "The content type of File.",
                location=Location.CONTENT_TYPE,
                wire="file",
            ),
            string(
                "model",
                "The analysis model to be used by the service.",
                location=Location.QUERY,
            ),
        ),
    ),
    OperationSpec(
        "compare-documents",
        "Compare two documents",
        Endpoint("POST", "/v1/comparison"),
        long_help="Compares two input documents. Documents must be in the same format.",
        flags=(
            file_path("file1", "The first document to compare.", required=True),
            file_path("file2", "The second document to compare.", required=True),
            string(
                "file1_content_type",
                "The content type of File1.",
                location=Location.CONTENT_TYPE,
                wire="file1",
            ),
            string(
                "file2_content_type",
                "The content type of File2.",
                location=Location.CONTENT_TYPE,
                wire="file2",
            ),
            string("file1_label", "A text label for the first document.", location=Location.QUERY),
            string(
                "file2_label",
                "A text label for the second document.",
                location=Location.QUERY,
            ),
            string(
                "model",
                "The analysis model to be used by the service.",
                location=Location.QUERY,
            ),
        ),
    ),
    OperationSpec(
        "add-feedback",
        "Add feedback",
        Endpoint("POST", "/v1/feedback"),
        long_help=(
            "Adds feedback in the form of _labels_ from a subject-matter expert (SME) to a "
            "governing document. **Important:** Feedback is not immediately incorporated into the "
            "training model, nor is it guaranteed to be incorporated at a later date. Instead, "
            "submitted feedback is used to suggest future updates to the training model."
        ),
        flags=(
            json_object("feedback_data", "Feedback data for submission.", required=True),
            string("user_id", "An optional string identifying the user."),
            string("comment", "An optional comment on or description of the feedback."),
        ),
    ),
    OperationSpec(
        "list-feedback",
        "List the feedback in a document",
        Endpoint("GET", "/v1/feedback"),
        long_help="Lists the feedback in a document.",
        flags=(
            string(
                "feedback_type",
                (
                    "An optional string that filters the output to include only feedback with the "
                    "specified feedback type."
                ),
            ),
            string(
                "before",
                (
                    "An optional string in the format `YYYY-MM-DD` that filters the output to "
                    "include only feedback that was added before the specified date."
                ),
            ),
            string(
                "after",
                (
                    "An optional string in the format `YYYY-MM-DD` that filters the output to "
                    "include only feedback that was added after the specified date."
                ),
            ),
            string(
                "document_title",
                (
                    "An optional string that filters the output to include only feedback from the "
                    "document with the specified `document_title`."
                ),
            ),
            string(
                "model_id",
                (
                    "An optional string that filters the output to include only feedback with the "
                    "specified `model_id`."
                ),
            ),
            string(
                "model_version",
                (
                    "An optional string that filters the output to include only feedback with the "
                    "specified `model_version`."
                ),
            ),
            string(
                "category_removed",
                "An optional string in the form of a comma-separated list of categories.",
            ),
            string(
                "category_added",
                "An optional string in the form of a comma-separated list of categories.",
            ),
            string(
                "category_not_changed",
                "An optional string in the form of a comma-separated list of categories.",
            ),
            string(
                "type_removed",
                "An optional string of comma-separated `nature`:`party` pairs.",
            ),
            string("type_added", "An optional string of comma-separated `nature`:`party` pairs."),
            string(
                "type_not_changed",
                "An optional string of comma-separated `nature`:`party` pairs.",
            ),
            integer(
                "page_limit",
                (
                    "An optional integer specifying the number of documents that you want the "
                    "service to return."
                ),
            ),
            string(
                "cursor",
                "An optional string that returns the set of documents after the previous set.",
            ),
            string(
                "sort",
                "An optional comma-separated list of fields in the document to sort on.",
            ),
            boolean("include_total", "An optional boolean value."),
        ),
    ),
    OperationSpec(
        "get-feedback",
        "Get a specified feedback entry",
        Endpoint("GET", "/v1/feedback/{feedback_id}"),
        long_help="Gets a feedback entry with a specified `feedback_id`.",
        flags=(
            string(
                "feedback_id",
                "A string that specifies the feedback entry to be included in the output.",
                required=True,
            ),
            string("model", "The analysis model to be used by the service."),
        ),
    ),
    OperationSpec(
        "delete-feedback",
        "Delete a specified feedback entry",
        Endpoint("DELETE", "/v1/feedback/{feedback_id}"),
        long_help="Deletes a feedback entry with a specified `feedback_id`.",
        flags=(
            string(
                "feedback_id",
                "A string that specifies the feedback entry to be deleted from the document.",
                required=True,
            ),
            string("model", "The analysis model to be used by the service."),
        ),
    ),
    OperationSpec(
        "create-batch",
        "Submit a batch-processing request",
        Endpoint("POST", "/v1/batches"),
        long_help=(
            "Run Compare and Comply methods over a collection of input documents.**Important:** "
            "Batch processing requires the use of the [IBM Cloud Object Storage "
            "service](https://cloud.ibm.com/docs/services/cloud-object-storage?topic=cloud-object-storage-about#about-ibm-cloud-object-storage)."
        ),
        flags=(
            string(
                "function",
                "The Compare and Comply method to run across the submitted input documents.",
                required=True,
                location=Location.QUERY,
            ),
            file_path(
                "input_credentials_file",
                "A JSON file containing the input Cloud Object Storage credentials.",
                required=True,
            ),
            string(
                "input_bucket_location",
                (
                    "The geographical location of the Cloud Object Storage input bucket as listed "
                    "on the **Endpoint** tab of your Cloud Object Storage instance; for example, "
                    "`us-geo`, `eu-geo`, or `ap-geo`."
                ),
                required=True,
                location=Location.FORM,
            ),
            string(
                "input_bucket_name",
                "The name of the Cloud Object Storage input bucket.",
                required=True,
                location=Location.FORM,
            ),
            file_path(
                "output_credentials_file",
                "A JSON file that lists the Cloud Object Storage output credentials.",
                required=True,
            ),
            string(
                "output_bucket_location",
                (
                    "The geographical location of the Cloud Object Storage output bucket as "
                    "listed on the **Endpoint** tab of your Cloud Object Storage instance; for "
                    "example, `us-geo`, `eu-geo`, or `ap-geo`."
                ),
                required=True,
                location=Location.FORM,
            ),
            string(
                "output_bucket_name",
                "The name of the Cloud Object Storage output bucket.",
                required=True,
                location=Location.FORM,
            ),
            string(
                "model",
                "The analysis model to be used by the service.",
                location=Location.QUERY,
            ),
        ),
    ),
    OperationSpec(
        "list-batches",
        "List submitted batch-processing jobs",
        Endpoint("GET", "/v1/batches"),
        long_help="Lists batch-processing jobs submitted by users.",
    ),
    OperationSpec(
        "get-batch",
        "Get information about a specific batch-processing job",
        Endpoint("GET", "/v1/batches/{batch_id}"),
        long_help="Gets information about a batch-processing job with a specified ID.",
        flags=(
            string(
                "batch_id",
                "The ID of the batch-processing job whose information you want to retrieve.",
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "update-batch",
        "Update a pending or active batch-processing job",
        Endpoint("PUT", "/v1/batches/{batch_id}"),
        long_help=(
            "Updates a pending or active batch-processing job. You can rescan the input bucket to "
            "check for new documents or cancel a job."
        ),
        flags=(
            string(
                "batch_id",
                "The ID of the batch-processing job you want to update.",
                required=True,
            ),
            string(
                "action",
                "The action you want to perform on the specified batch-processing job.",
                required=True,
                location=Location.QUERY,
            ),
            string(
                "model",
                "The analysis model to be used by the service.",
                location=Location.QUERY,
            ),
        ),
    ),
)

SERVICE = ServiceSpec(
    id="compare-comply-v1",
    short_help="Compare and Comply v1",
    long_help=(
        "IBM Watson Compare and Comply analyzes governing documents to provide details about "
        "critical aspects of the documents."
    ),
    auth_key="compare_comply",
    default_url="https://gateway.watsonplatform.net/compare-comply/api",
    operations=OPERATIONS,
    versioned=True,
    confirm_running=True,
)
