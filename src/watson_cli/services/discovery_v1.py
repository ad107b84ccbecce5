"""Discovery v1 operations."""

from __future__ import annotations

from watson_cli.registry import (
    Endpoint,
    Location,
    OperationSpec,
    ReturnKind,
    ServiceSpec,
    boolean,
    file_path,
    integer,
    json_array,
    json_object,
    string,
    strings,
)

OPERATIONS = (
    OperationSpec(
        "create-environment",
        "Create an environment",
        Endpoint("POST", "/v1/environments"),
        long_help=(
            "Creates a new environment for private data. An environment must be created before "
            "collections can be created. **Note**: You can create only one environment for "
            "private data per service instance. An attempt to create another environment results "
            "in an error."
        ),
        flags=(
            string("name", "Name that identifies the environment.", required=True),
            string("description", "Description of the environment."),
            string("size", "Size of the environment."),
        ),
    ),
    OperationSpec(
        "list-environments",
        "List environments",
        Endpoint("GET", "/v1/environments"),
        long_help="List existing environments for the service instance.",
        flags=(
            string("name", "Show only the environment with the given name."),
        ),
    ),
    OperationSpec(
        "get-environment",
        "Get environment info",
        Endpoint("GET", "/v1/environments/{environment_id}"),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
        ),
    ),
    OperationSpec(
        "update-environment",
        "Update an environment",
        Endpoint("PUT", "/v1/environments/{environment_id}"),
        long_help=(
            "Updates an environment. The environment's **name** and  **description** parameters "
            "can be changed. You must specify a **name** for the environment."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("name", "Name that identifies the environment."),
            string("description", "Description of the environment."),
            string(
                "size",
                (
                    "Size that the environment should be increased to. Environment size cannot be "
                    "modified when using a Lite plan."
                ),
            ),
        ),
    ),
    OperationSpec(
        "delete-environment",
        "Delete environment",
        Endpoint("DELETE", "/v1/environments/{environment_id}"),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
        ),
    ),
    OperationSpec(
        "list-fields",
        "List fields across collections",
        Endpoint("GET", "/v1/environments/{environment_id}/fields"),
        long_help=(
            "Gets a list of the unique fields (and their types) stored in the indexes of the "
            "specified collections."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            strings(
                "collection_ids",
                "A comma-separated list of collection IDs to be queried against.",
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "create-configuration",
        "Add configuration",
        Endpoint("POST", "/v1/environments/{environment_id}/configurations"),
        long_help=(
            "Creates a new configuration.If the input configuration contains the "
            "**configuration_id**, **created**, or **updated** properties, then they are ignored "
            "and overridden by the system, and an error is not returned so that the overridden "
            "fields do not need to be removed when copying a configuration.The configuration can "
            "contain unrecognized JSON fields."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("name", "The name of the configuration.", required=True),
            string("description", "The description of the configuration, if available."),
            json_object("conversions", "Document conversion settings."),
            json_array(
                "enrichments",
                "An array of document enrichment settings for the configuration.",
            ),
            json_array(
                "normalizations",
                (
                    "Defines operations that can be used to transform the final output JSON into "
                    "a normalized form."
                ),
            ),
            json_object("source", "Object containing source parameters for the configuration."),
        ),
    ),
    OperationSpec(
        "list-configurations",
        "List configurations",
        Endpoint("GET", "/v1/environments/{environment_id}/configurations"),
        long_help="Lists existing configurations for the service instance.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("name", "Find configurations with the given name."),
        ),
    ),
    OperationSpec(
        "get-configuration",
        "Get configuration details",
        Endpoint("GET", "/v1/environments/{environment_id}/configurations/{configuration_id}"),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("configuration_id", "The ID of the configuration.", required=True),
        ),
    ),
    OperationSpec(
        "update-configuration",
        "Update a configuration",
        Endpoint("PUT", "/v1/environments/{environment_id}/configurations/{configuration_id}"),
        long_help=(
            "Replaces an existing configuration. * Completely replaces the original "
            "configuration. * The **configuration_id**, **updated**, and **created** fields are "
            "accepted in the request, but they are ignored, and an error is not generated."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("configuration_id", "The ID of the configuration.", required=True),
            string("name", "The name of the configuration.", required=True),
            string("description", "The description of the configuration, if available."),
            json_object("conversions", "Document conversion settings."),
            json_array(
                "enrichments",
                "An array of document enrichment settings for the configuration.",
            ),
            json_array(
                "normalizations",
                (
                    "Defines operations that can be used to transform the final output JSON into "
                    "a normalized form."
                ),
            ),
            json_object("source", "Object containing source parameters for the configuration."),
        ),
    ),
    OperationSpec(
        "delete-configuration",
        "Delete a configuration",
        Endpoint("DELETE", "/v1/environments/{environment_id}/configurations/{configuration_id}"),
        long_help=(
            "The deletion is performed unconditionally. A configuration deletion request succeeds "
            "even if the configuration is referenced by a collection or document ingestion. "
            "However, documents that have already been submitted for processing continue to use "
            "the deleted configuration."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("configuration_id", "The ID of the configuration.", required=True),
        ),
    ),
    OperationSpec(
        "create-collection",
        "Create a collection",
        Endpoint("POST", "/v1/environments/{environment_id}/collections"),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("name", "The name of the collection to be created.", required=True),
            string("description", "A description of the collection."),
            string(
                "configuration_id",
                "The ID of the configuration in which the collection is to be created.",
            ),
            string(
                "language",
                (
                    "The language of the documents stored in the collection, in the form of an "
                    "ISO 639-1 language code."
                ),
            ),
        ),
    ),
    OperationSpec(
        "list-collections",
        "List collections",
        Endpoint("GET", "/v1/environments/{environment_id}/collections"),
        long_help="Lists existing collections for the service instance.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("name", "Find collections with the given name."),
        ),
    ),
    OperationSpec(
        "get-collection",
        "Get collection details",
        Endpoint("GET", "/v1/environments/{environment_id}/collections/{collection_id}"),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
    ),
    OperationSpec(
        "update-collection",
        "Update a collection",
        Endpoint("PUT", "/v1/environments/{environment_id}/collections/{collection_id}"),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("name", "The name of the collection."),
            string("description", "A description of the collection."),
            string(
                "configuration_id",
                "The ID of the configuration in which the collection is to be updated.",
            ),
        ),
    ),
    OperationSpec(
        "delete-collection",
        "Delete a collection",
        Endpoint("DELETE", "/v1/environments/{environment_id}/collections/{collection_id}"),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
    ),
    OperationSpec(
        "list-collection-fields",
        "List collection fields",
        Endpoint("GET", "/v1/environments/{environment_id}/collections/{collection_id}/fields"),
        long_help="Gets a list of the unique fields (and their types) stored in the index.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
    ),
    OperationSpec(
        "list-expansions",
        "Get the expansion list",
        Endpoint("GET", "/v1/environments/{environment_id}/collections/{collection_id}/expansions"),
        long_help=(
            "Returns the current expansion list for the specified collection. If an expansion "
            "list is not specified, an object with empty expansion arrays is returned."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
    ),
    OperationSpec(
        "create-expansions",
        "Create or update expansion list",
        Endpoint("POST", "/v1/environments/{environment_id}/collections/{collection_id}/expansions"),
        long_help=(
            "Create or replace the Expansion list for this collection. The maximum number of "
            "expanded terms per collection is `500`. The current expansion list is replaced with "
            "the uploaded content."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            json_array("expansions", "An array of query expansion definitions.", required=True),
        ),
    ),
    OperationSpec(
        "delete-expansions",
        "Delete the expansion list",
        Endpoint("DELETE", "/v1/environments/{environment_id}/collections/{collection_id}/expansions"),
        long_help=(
            "Remove the expansion information for this collection. The expansion list must be "
            "deleted to disable query expansion for a collection."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "get-tokenization-dictionary-status",
        "Get tokenization dictionary status",
        Endpoint("GET", "/v1/environments/{environment_id}/collections/{collection_id}/word_lists/tokenization_dictionary"),
        long_help="Returns the current status of the tokenization dictionary for the specified collection.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
    ),
    OperationSpec(
        "create-tokenization-dictionary",
        "Create tokenization dictionary",
        Endpoint("POST", "/v1/environments/{environment_id}/collections/{collection_id}/word_lists/tokenization_dictionary"),
        long_help="Upload a custom tokenization dictionary to use with the specified collection.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            json_array("tokenization_rules", "An array of tokenization rules."),
        ),
    ),
    OperationSpec(
        "delete-tokenization-dictionary",
        "Delete tokenization dictionary",
        Endpoint("DELETE", "/v1/environments/{environment_id}/collections/{collection_id}/word_lists/tokenization_dictionary"),
        long_help="Delete the tokenization dictionary from the collection.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "get-stopword-list-status",
        "Get stopword list status",
        Endpoint("GET", "/v1/environments/{environment_id}/collections/{collection_id}/word_lists/stopwords"),
        long_help="Returns the current status of the stopword list for the specified collection.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
    ),
    OperationSpec(
        "create-stopword-list",
        "Create stopword list",
        Endpoint("POST", "/v1/environments/{environment_id}/collections/{collection_id}/word_lists/stopwords"),
        long_help="Upload a custom stopword list to use with the specified collection.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            file_path(
                "stopword_file",
                "The content of the stopword list to ingest.",
                required=True,
            ),
            string(
                "stopword_filename",
                "The filename for StopwordFile.",
                required=True,
                location=Location.FILENAME,
                wire="stopword_file",
            ),
        ),
    ),
    OperationSpec(
        "delete-stopword-list",
        "Delete a custom stopword list",
        Endpoint("DELETE", "/v1/environments/{environment_id}/collections/{collection_id}/word_lists/stopwords"),
        long_help=(
            "Delete a custom stopword list from the collection. After a custom stopword list is "
            "deleted, the default list is used for the collection."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "add-document",
        "Add a document",
        Endpoint("POST", "/v1/environments/{environment_id}/collections/{collection_id}/documents"),
        long_help=(
            "Add a document to a collection with optional metadata. * The **version** query "
            "parameter is still required. * Returns immediately after the system has accepted the "
            "document for processing. * The user must provide document content, metadata, or both."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            file_path("file", "The content of the document to ingest."),
            string("filename", "The filename for File.", location=Location.FILENAME, wire="file"),
            string(
                "file_content_type",
                "The content type of File.",
                location=Location.CONTENT_TYPE,
                wire="file",
            ),
            string(
                "metadata",
                (
                    "The maximum supported metadata file size is 1 MB. Metadata parts larger than "
                    "1 MB are rejected."
                ),
                location=Location.FORM,
            ),
        ),
    ),
    OperationSpec(
        "get-document-status",
        "Get document details",
        Endpoint("GET", "/v1/environments/{environment_id}/collections/{collection_id}/documents/{document_id}"),
        long_help=(
            "Fetch status details about a submitted document. **Note:** this operation does not "
            "return the document itself. Instead, it returns only the document's processing "
            "status and any notices (warnings or errors) that were generated when the document "
            "was ingested. Use the query API to retrieve the actual document content."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("document_id", "The ID of the document.", required=True),
        ),
    ),
    OperationSpec(
        "update-document",
        "Update a document",
        Endpoint("POST", "/v1/environments/{environment_id}/collections/{collection_id}/documents/{document_id}"),
        long_help=(
            "Replace an existing document or add a document with a specified **document_id**. "
            "Starts ingesting a document with optional metadata.**Note:** When uploading a new "
            "document with this method it automatically replaces any document stored with the "
            "same **document_id** if it exists."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("document_id", "The ID of the document.", required=True),
            file_path("file", "The content of the document to ingest."),
            string("filename", "The filename for File.", location=Location.FILENAME, wire="file"),
            string(
                "file_content_type",
                "The content type of File.",
                location=Location.CONTENT_TYPE,
                wire="file",
            ),
            string(
                "metadata",
                (
                    "The maximum supported metadata file size is 1 MB. Metadata parts larger than "
                    "1 MB are rejected."
                ),
                location=Location.FORM,
            ),
        ),
    ),
    OperationSpec(
        "delete-document",
        "Delete a document",
        Endpoint("DELETE", "/v1/environments/{environment_id}/collections/{collection_id}/documents/{document_id}"),
        long_help=(
            "If the given document ID is invalid, or if the document is not found, then the a "
            "success response is returned (HTTP status code `200`) with the status set to "
            "'deleted'."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("document_id", "The ID of the document.", required=True),
        ),
    ),
    OperationSpec(
        "query",
        "Query a collection",
        Endpoint("POST", "/v1/environments/{environment_id}/collections/{collection_id}/query"),
        long_help=(
            "By using this method, you can construct long queries. For details, see the "
            "[Discovery "
            "documentation](https://cloud.ibm.com/docs/services/discovery?topic=discovery-query-concepts#query-concepts)."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string(
                "filter",
                "A cacheable query that excludes documents that don't mention the query content.",
            ),
            string(
                "query",
                (
                    "A query search returns all documents in your data set with full enrichments "
                    "and full text, but with the most relevant documents listed first."
                ),
            ),
            string(
                "natural_language_query",
                (
                    "A natural language query that returns relevant documents by utilizing "
                    "training data and natural language understanding."
                ),
            ),
            boolean(
                "passages",
                "A passages query that returns the most relevant passages from the results.",
            ),
            string(
                "aggregation",
                (
                    "An aggregation search that returns an exact answer by combining query search "
                    "with filters."
                ),
            ),
            integer("count", "Number of results to return."),
            string(
                "return",
                "A comma-separated list of the portion of the document hierarchy to return.",
            ),
            integer("offset", "The number of query results to skip at the beginning."),
            string("sort", "A comma-separated list of fields in the document to sort on."),
            boolean(
                "highlight",
                (
                    "When true, a highlight field is returned for each result which contains the "
                    "fields which match the query with `<em></em>` tags around the matching query "
                    "terms."
                ),
            ),
            string(
                "passages_fields",
                "A comma-separated list of fields that passages are drawn from.",
            ),
            integer(
                "passages_count",
                (
                    "The maximum number of passages to return. The search returns fewer passages "
                    "if the requested total is not found."
                ),
            ),
            integer(
                "passages_characters",
                "The approximate number of characters that any one passage will have.",
            ),
            boolean(
                "deduplicate",
                (
                    "When `true`, and used with a Watson Discovery News collection, duplicate "
                    "results (based on the contents of the **title** field) are removed."
                ),
            ),
            string(
                "deduplicate_field",
                (
                    "When specified, duplicate results based on the field specified are removed "
                    "from the returned results."
                ),
            ),
            boolean(
                "similar",
                (
                    "When `true`, results are returned based on their similarity to the document "
                    "IDs specified in the **similar.document_ids** parameter."
                ),
            ),
            string(
                "similar_document_ids",
                (
                    "A comma-separated list of document IDs to find similar documents.**Tip:** "
                    "Include the **natural_language_query** parameter to expand the scope of the "
                    "document similarity search with the natural language query."
                ),
            ),
            string(
                "similar_fields",
                (
                    "A comma-separated list of field names that are used as a basis for "
                    "comparison to identify similar documents."
                ),
            ),
            string("bias", "Field which the returned results will be biased against."),
            boolean(
                "spelling_suggestions",
                (
                    "When `true` and the **natural_language_query** parameter is used, the "
                    "**natural_languge_query** parameter is spell checked."
                ),
            ),
            boolean(
                "x_watson_logging_opt_out",
                "If `true`, queries are not stored in the Discovery **Logs** endpoint.",
                location=Location.HEADER,
                wire="X-Watson-Logging-Opt-Out",
            ),
        ),
    ),
    OperationSpec(
        "query-notices",
        "Query system notices",
        Endpoint("GET", "/v1/environments/{environment_id}/collections/{collection_id}/notices"),
        long_help=(
            "Queries for notices (errors or warnings) that might have been generated by the "
            "system. Notices are generated when ingesting documents and performing relevance "
            "training."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string(
                "filter",
                "A cacheable query that excludes documents that don't mention the query content.",
            ),
            string(
                "query",
                (
                    "A query search returns all documents in your data set with full enrichments "
                    "and full text, but with the most relevant documents listed first."
                ),
            ),
            string(
                "natural_language_query",
                (
                    "A natural language query that returns relevant documents by utilizing "
                    "training data and natural language understanding."
                ),
            ),
            boolean(
                "passages",
                "A passages query that returns the most relevant passages from the results.",
            ),
            string(
                "aggregation",
                (
                    "An aggregation search that returns an exact answer by combining query search "
                    "with filters."
                ),
            ),
            integer(
                "count",
                (
                    "Number of results to return. The maximum for the **count** and **offset** "
                    "values together in any one query is **10000**."
                ),
            ),
            strings(
                "return",
                "A comma-separated list of the portion of the document hierarchy to return.",
            ),
            integer("offset", "The number of query results to skip at the beginning."),
            strings("sort", "A comma-separated list of fields in the document to sort on."),
            boolean(
                "highlight",
                (
                    "When true, a highlight field is returned for each result which contains the "
                    "fields which match the query with `<em></em>` tags around the matching query "
                    "terms."
                ),
            ),
            strings(
                "passages_fields",
                "A comma-separated list of fields that passages are drawn from.",
            ),
            integer(
                "passages_count",
                (
                    "The maximum number of passages to return. The search returns fewer passages "
                    "if the requested total is not found."
                ),
            ),
            integer(
                "passages_characters",
                "The approximate number of characters that any one passage will have.",
            ),
            string(
                "deduplicate_field",
                (
                    "When specified, duplicate results based on the field specified are removed "
                    "from the returned results."
                ),
            ),
            boolean(
                "similar",
                (
                    "When `true`, results are returned based on their similarity to the document "
                    "IDs specified in the **similar.document_ids** parameter."
                ),
            ),
            strings(
                "similar_document_ids",
                (
                    "A comma-separated list of document IDs to find similar documents.**Tip:** "
                    "Include the **natural_language_query** parameter to expand the scope of the "
                    "document similarity search with the natural language query."
                ),
            ),
            strings(
                "similar_fields",
                (
                    "A comma-separated list of field names that are used as a basis for "
                    "comparison to identify similar documents."
                ),
            ),
        ),
    ),
    OperationSpec(
        "federated-query",
        "Query multiple collections",
        Endpoint("POST", "/v1/environments/{environment_id}/query"),
        long_help=(
            "By using this method, you can construct long queries that search multiple "
            "collection. For details, see the [Discovery "
            "documentation](https://cloud.ibm.com/docs/services/discovery?topic=discovery-query-concepts#query-concepts)."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string(
                "filter",
                "A cacheable query that excludes documents that don't mention the query content.",
            ),
            string(
                "query",
                (
                    "A query search returns all documents in your data set with full enrichments "
                    "and full text, but with the most relevant documents listed first."
                ),
            ),
            string(
                "natural_language_query",
                (
                    "A natural language query that returns relevant documents by utilizing "
                    "training data and natural language understanding."
                ),
            ),
            boolean(
                "passages",
                "A passages query that returns the most relevant passages from the results.",
            ),
            string(
                "aggregation",
                (
                    "An aggregation search that returns an exact answer by combining query search "
                    "with filters."
                ),
            ),
            integer("count", "Number of results to return."),
            string(
                "return",
                "A comma-separated list of the portion of the document hierarchy to return.",
            ),
            integer("offset", "The number of query results to skip at the beginning."),
            string("sort", "A comma-separated list of fields in the document to sort on."),
            boolean(
                "highlight",
                (
                    "When true, a highlight field is returned for each result which contains the "
                    "fields which match the query with `<em></em>` tags around the matching query "
                    "terms."
                ),
            ),
            string(
                "passages_fields",
                "A comma-separated list of fields that passages are drawn from.",
            ),
            integer(
                "passages_count",
                (
                    "The maximum number of passages to return. The search returns fewer passages "
                    "if the requested total is not found."
                ),
            ),
            integer(
                "passages_characters",
                "The approximate number of characters that any one passage will have.",
            ),
            boolean(
                "deduplicate",
                (
                    "When `true`, and used with a Watson Discovery News collection, duplicate "
                    "results (based on the contents of the **title** field) are removed."
                ),
            ),
            string(
                "deduplicate_field",
                (
                    "When specified, duplicate results based on the field specified are removed "
                    "from the returned results."
                ),
            ),
            boolean(
                "similar",
                (
                    "When `true`, results are returned based on their similarity to the document "
                    "IDs specified in the **similar.document_ids** parameter."
                ),
            ),
            string(
                "similar_document_ids",
                (
                    "A comma-separated list of document IDs to find similar documents.**Tip:** "
                    "Include the **natural_language_query** parameter to expand the scope of the "
                    "document similarity search with the natural language query."
                ),
            ),
            string(
                "similar_fields",
                (
                    "A comma-separated list of field names that are used as a basis for "
                    "comparison to identify similar documents."
                ),
            ),
            string("bias", "Field which the returned results will be biased against."),
            string(
                "collection_ids",
                "A comma-separated list of collection IDs to be queried against.",
            ),
            boolean(
                "x_watson_logging_opt_out",
                "If `true`, queries are not stored in the Discovery **Logs** endpoint.",
                location=Location.HEADER,
                wire="X-Watson-Logging-Opt-Out",
            ),
        ),
    ),
    OperationSpec(
        "federated-query-notices",
        "Query multiple collection system notices",
        Endpoint("GET", "/v1/environments/{environment_id}/notices"),
        long_help=(
            "Queries for notices (errors or warnings) that might have been generated by the "
            "system. Notices are generated when ingesting documents and performing relevance "
            "training."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            strings(
                "collection_ids",
                "A comma-separated list of collection IDs to be queried against.",
                required=True,
            ),
            string(
                "filter",
                "A cacheable query that excludes documents that don't mention the query content.",
            ),
            string(
                "query",
                (
                    "A query search returns all documents in your data set with full enrichments "
                    "and full text, but with the most relevant documents listed first."
                ),
            ),
            string(
                "natural_language_query",
                (
                    "A natural language query that returns relevant documents by utilizing "
                    "training data and natural language understanding."
                ),
            ),
            string(
                "aggregation",
                (
                    "An aggregation search that returns an exact answer by combining query search "
                    "with filters."
                ),
            ),
            integer(
                "count",
                (
                    "Number of results to return. The maximum for the **count** and **offset** "
                    "values together in any one query is **10000**."
                ),
            ),
            strings(
                "return",
                "A comma-separated list of the portion of the document hierarchy to return.",
            ),
            integer("offset", "The number of query results to skip at the beginning."),
            strings("sort", "A comma-separated list of fields in the document to sort on."),
            boolean(
                "highlight",
                (
                    "When true, a highlight field is returned for each result which contains the "
                    "fields which match the query with `<em></em>` tags around the matching query "
                    "terms."
                ),
            ),
            string(
                "deduplicate_field",
                (
                    "When specified, duplicate results based on the field specified are removed "
                    "from the returned results."
                ),
            ),
            boolean(
                "similar",
                (
                    "When `true`, results are returned based on their similarity to the document "
                    "IDs specified in the **similar.document_ids** parameter."
                ),
            ),
            strings(
                "similar_document_ids",
                (
                    "A comma-separated list of document IDs to find similar documents.**Tip:** "
                    "Include the **natural_language_query** parameter to expand the scope of the "
                    "document similarity search with the natural language query."
                ),
            ),
            strings(
                "similar_fields",
                (
                    "A comma-separated list of field names that are used as a basis for "
                    "comparison to identify similar documents."
                ),
            ),
        ),
    ),
    OperationSpec(
        "get-autocompletion",
        "Get Autocomplete Suggestions",
        Endpoint("GET", "/v1/environments/{environment_id}/collections/{collection_id}/autocompletion"),
        long_help=(
            "Returns completion query suggestions for the specified prefix.  /n/n **Important:** "
            "this method is only valid when using the Cloud Pak version of Discovery."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string(
                "field",
                (
                    "The field in the result documents that autocompletion suggestions are "
                    "identified from."
                ),
            ),
            string("prefix", "The prefix to use for autocompletion."),
            integer("count", "The number of autocompletion suggestions to return."),
        ),
    ),
    OperationSpec(
        "list-training-data",
        "List training data",
        Endpoint("GET", "/v1/environments/{environment_id}/collections/{collection_id}/training_data"),
        long_help="Lists the training data for the specified collection.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
    ),
    OperationSpec(
        "add-training-data",
        "Add query to training data",
        Endpoint("POST", "/v1/environments/{environment_id}/collections/{collection_id}/training_data"),
        long_help=(
            "Adds a query to the training data for this collection. The query can contain a "
            "filter and natural language query."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("natural_language_query", "The natural text query for the new training query."),
            string(
                "filter",
                (
                    "The filter used on the collection before the **natural_language_query** is "
                    "applied."
                ),
            ),
            json_array("examples", "Array of training examples."),
        ),
    ),
    OperationSpec(
        "delete-all-training-data",
        "Delete all training data",
        Endpoint("DELETE", "/v1/environments/{environment_id}/collections/{collection_id}/training_data"),
        long_help="Deletes all training data from a collection.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "get-training-data",
        "Get details about a query",
        Endpoint("GET", "/v1/environments/{environment_id}/collections/{collection_id}/training_data/{query_id}"),
        long_help=(
            "Gets details for a specific training data query, including the query string and all "
            "examples."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("query_id", "The ID of the query used for training.", required=True),
        ),
    ),
    OperationSpec(
        "delete-training-data",
        "Delete a training data query",
        Endpoint("DELETE", "/v1/environments/{environment_id}/collections/{collection_id}/training_data/{query_id}"),
        long_help="Removes the training data query and all associated examples from the training data set.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("query_id", "The ID of the query used for training.", required=True),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "list-training-examples",
        "List examples for a training data query",
        Endpoint("GET", "/v1/environments/{environment_id}/collections/{collection_id}/training_data/{query_id}/examples"),
        long_help="List all examples for this training data query.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("query_id", "The ID of the query used for training.", required=True),
        ),
    ),
    OperationSpec(
        "create-training-example",
        "Add example to training data query",
        Endpoint("POST", "/v1/environments/{environment_id}/collections/{collection_id}/training_data/{query_id}/examples"),
        long_help="Adds a example to this training data query.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("query_id", "The ID of the query used for training.", required=True),
            string("document_id", "The document ID associated with this training example."),
            string(
                "cross_reference",
                "The cross reference associated with this training example.",
            ),
            integer("relevance", "The relevance of the training example."),
        ),
    ),
    OperationSpec(
        "delete-training-example",
        "Delete example for training data query",
        Endpoint("DELETE", "/v1/environments/{environment_id}/collections/{collection_id}/training_data/{query_id}/examples/{example_id}"),
        long_help="Deletes the example document with the given ID from the training data query.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("query_id", "The ID of the query used for training.", required=True),
            string("example_id", "The ID of the document as it is indexed.", required=True),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "update-training-example",
        "Change label or cross reference for example",
        Endpoint("PUT", "/v1/environments/{environment_id}/collections/{collection_id}/training_data/{query_id}/examples/{example_id}"),
        long_help="Changes the label or cross reference query for this training data example.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("query_id", "The ID of the query used for training.", required=True),
            string("example_id", "The ID of the document as it is indexed.", required=True),
            string("cross_reference", "The example to add."),
            integer("relevance", "The relevance value for this example."),
        ),
    ),
    OperationSpec(
        "get-training-example",
        "Get details for training data example",
        Endpoint("GET", "/v1/environments/{environment_id}/collections/{collection_id}/training_data/{query_id}/examples/{example_id}"),
        long_help="Gets the details for this training example.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("query_id", "The ID of the query used for training.", required=True),
            string("example_id", "The ID of the document as it is indexed.", required=True),
        ),
    ),
    OperationSpec(
        "delete-user-data",
        "Delete labeled data",
        Endpoint("DELETE", "/v1/user_data"),
        long_help=(
            "Deletes all data associated with a specified customer ID. The method has no effect "
            "if no data is associated with the customer ID. You associate a customer ID with data "
            "by passing the **X-Watson-Metadata** header with a request that passes data."
        ),
        flags=(
            string(
                "customer_id",
                "The customer ID for which all data is to be deleted.",
                required=True,
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "create-event",
        "Create event",
        Endpoint("POST", "/v1/events"),
        long_help=(
            "The **Events** API can be used to create log entries that are associated with "
            "specific queries. For example, you can record which documents in the results set "
            "were 'clicked' by a user and when that click occured."
        ),
        flags=(
            string("type", "The event type to be created.", required=True),
            json_object("data", "Query event data object.", required=True),
        ),
    ),
    OperationSpec(
        "query-log",
        "Search the query and event log",
        Endpoint("GET", "/v1/logs"),
        long_help=(
            "Searches the query and event log to find query sessions that match the specified "
            "criteria. Searching the **logs** endpoint uses the standard Discovery query syntax "
            "for the parameters that are supported."
        ),
        flags=(
            string(
                "filter",
                "A cacheable query that excludes documents that don't mention the query content.",
            ),
            string(
                "query",
                (
                    "A query search returns all documents in your data set with full enrichments "
                    "and full text, but with the most relevant documents listed first."
                ),
            ),
            integer(
                "count",
                (
                    "Number of results to return. The maximum for the **count** and **offset** "
                    "values together in any one query is **10000**."
                ),
            ),
            integer("offset", "The number of query results to skip at the beginning."),
            strings("sort", "A comma-separated list of fields in the document to sort on."),
        ),
    ),
    OperationSpec(
        "get-metrics-query",
        "Number of queries over time",
        Endpoint("GET", "/v1/metrics/number_of_queries"),
        long_help=(
            "Total number of queries using the **natural_language_query** parameter over a "
            "specific time window."
        ),
        flags=(
            string(
                "start_time",
                (
                    "Metric is computed from data recorded after this timestamp; must be in "
                    "`YYYY-MM-DDThh:mm:ssZ` format."
                ),
            ),
            string(
                "end_time",
                (
                    "Metric is computed from data recorded before this timestamp; must be in "
                    "`YYYY-MM-DDThh:mm:ssZ` format."
                ),
            ),
            string("result_type", "The type of result to consider when calculating the metric."),
        ),
    ),
    OperationSpec(
        "get-metrics-query-event",
        "Number of queries with an event over time",
        Endpoint("GET", "/v1/metrics/number_of_queries_with_event"),
        long_help=(
            "Total number of queries using the **natural_language_query** parameter that have a "
            "corresponding 'click' event over a specified time window. This metric requires "
            "having integrated event tracking in your application using the **Events** API."
        ),
        flags=(
            string(
                "start_time",
                (
                    "Metric is computed from data recorded after this timestamp; must be in "
                    "`YYYY-MM-DDThh:mm:ssZ` format."
                ),
            ),
            string(
                "end_time",
                (
                    "Metric is computed from data recorded before this timestamp; must be in "
                    "`YYYY-MM-DDThh:mm:ssZ` format."
                ),
            ),
            string("result_type", "The type of result to consider when calculating the metric."),
        ),
    ),
    OperationSpec(
        "get-metrics-query-no-results",
        "Number of queries with no search results over time",
        Endpoint("GET", "/v1/metrics/number_of_queries_with_no_search_results"),
        long_help=(
            "Total number of queries using the **natural_language_query** parameter that have no "
            "results returned over a specified time window."
        ),
        flags=(
            string(
                "start_time",
                (
                    "Metric is computed from data recorded after this timestamp; must be in "
                    "`YYYY-MM-DDThh:mm:ssZ` format."
                ),
            ),
            string(
                "end_time",
                (
                    "Metric is computed from data recorded before this timestamp; must be in "
                    "`YYYY-MM-DDThh:mm:ssZ` format."
                ),
            ),
            string("result_type", "The type of result to consider when calculating the metric."),
        ),
    ),
    OperationSpec(
        "get-metrics-event-rate",
        "Percentage of queries with an associated event",
        Endpoint("GET", "/v1/metrics/event_rate"),
        long_help=(
            "The percentage of queries using the **natural_language_query** parameter that have a "
            "corresponding 'click' event over a specified time window.  This metric requires "
            "having integrated event tracking in your application using the **Events** API."
        ),
        flags=(
            string(
                "start_time",
                (
                    "Metric is computed from data recorded after this timestamp; must be in "
                    "`YYYY-MM-DDThh:mm:ssZ` format."
                ),
            ),
            string(
                "end_time",
                (
                    "Metric is computed from data recorded before this timestamp; must be in "
                    "`YYYY-MM-DDThh:mm:ssZ` format."
                ),
            ),
            string("result_type", "The type of result to consider when calculating the metric."),
        ),
    ),
    OperationSpec(
        "get-metrics-query-token-event",
        "Most frequent query tokens with an event",
        Endpoint("GET", "/v1/metrics/top_query_tokens_with_event_rate"),
        long_help=(
            "The most frequent query tokens parsed from the **natural_language_query** parameter "
            "and their corresponding 'click' event rate within the recording period (queries and "
            "events are stored for 30 days). A query token is an individual word or unigram "
            "within the query string."
        ),
        flags=(
            integer(
                "count",
                (
                    "Number of results to return. The maximum for the **count** and **offset** "
                    "values together in any one query is **10000**."
                ),
            ),
        ),
    ),
    OperationSpec(
        "list-credentials",
        "List credentials",
        Endpoint("GET", "/v1/environments/{environment_id}/credentials"),
        long_help=(
            "List all the source credentials that have been created for this service instance. "
            "**Note:**  All credentials are sent over an encrypted connection and encrypted at "
            "rest."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
        ),
    ),
    OperationSpec(
        "create-credentials",
        "Create credentials",
        Endpoint("POST", "/v1/environments/{environment_id}/credentials"),
        long_help=(
            "Creates a set of credentials to connect to a remote source. Created credentials are "
            "used in a configuration to associate a collection with the remote source.**Note:** "
            "All credentials are sent over an encrypted connection and encrypted at rest."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string(
                "source_type",
                (
                    "The source that this credentials object connects to.-  `box` indicates the "
                    "credentials are used to connect an instance of Enterprise Box.-  "
                    "`salesforce` indicates the credentials are used to connect to Salesforce.-  "
                    "`sharepoint` indicates the credentials are used to connect to Microsoft "
                    "SharePoint Online.-  `web_crawl` indicates the credentials are used to "
                    "perform a web crawl.=  `cloud_object_storage` indicates the credentials are "
                    "used to connect to an IBM Cloud Object Store."
                ),
            ),
            json_object(
                "credential_details",
                "Object containing details of the stored credentials.",
            ),
            string("status", "The current status of this set of credentials."),
        ),
    ),
    OperationSpec(
        "get-credentials",
        "View Credentials",
        Endpoint("GET", "/v1/environments/{environment_id}/credentials/{credential_id}"),
        long_help=(
            "Returns details about the specified credentials. **Note:** Secure credential "
            "information such as a password or SSH key is never returned and must be obtained "
            "from the source system."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string(
                "credential_id",
                "The unique identifier for a set of source credentials.",
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "update-credentials",
        "Update credentials",
        Endpoint("PUT", "/v1/environments/{environment_id}/credentials/{credential_id}"),
        long_help=(
            "Updates an existing set of source credentials.**Note:** All credentials are sent "
            "over an encrypted connection and encrypted at rest."
        ),
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string(
                "credential_id",
                "The unique identifier for a set of source credentials.",
                required=True,
            ),
            string(
                "source_type",
                (
                    "The source that this credentials object connects to.-  `box` indicates the "
                    "credentials are used to connect an instance of Enterprise Box.-  "
                    "`salesforce` indicates the credentials are used to connect to Salesforce.-  "
                    "`sharepoint` indicates the credentials are used to connect to Microsoft "
                    "SharePoint Online.-  `web_crawl` indicates the credentials are used to "
                    "perform a web crawl.=  `cloud_object_storage` indicates the credentials are "
                    "used to connect to an IBM Cloud Object Store."
                ),
            ),
            json_object(
                "credential_details",
                "Object containing details of the stored credentials.",
            ),
            string("status", "The current status of this set of credentials."),
        ),
    ),
    OperationSpec(
        "delete-credentials",
        "Delete credentials",
        Endpoint("DELETE", "/v1/environments/{environment_id}/credentials/{credential_id}"),
        long_help="Deletes a set of stored credentials from your Discovery instance.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string(
                "credential_id",
                "The unique identifier for a set of source credentials.",
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "list-gateways",
        "List Gateways",
        Endpoint("GET", "/v1/environments/{environment_id}/gateways"),
        long_help="List the currently configured gateways.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
        ),
    ),
    OperationSpec(
        "create-gateway",
        "Create Gateway",
        Endpoint("POST", "/v1/environments/{environment_id}/gateways"),
        long_help="Create a gateway configuration to use with a remotely installed gateway.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("name", "User-defined name."),
        ),
    ),
    OperationSpec(
        "get-gateway",
        "List Gateway Details",
        Endpoint("GET", "/v1/environments/{environment_id}/gateways/{gateway_id}"),
        long_help="List information about the specified gateway.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("gateway_id", "The requested gateway ID.", required=True),
        ),
    ),
    OperationSpec(
        "delete-gateway",
        "Delete Gateway",
        Endpoint("DELETE", "/v1/environments/{environment_id}/gateways/{gateway_id}"),
        long_help="Delete the specified gateway configuration.",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("gateway_id", "The requested gateway ID.", required=True),
        ),
    ),
)

SERVICE = ServiceSpec(
    id="discovery-v1",
    short_help="Parent command for Discovery",
    long_help=(
        "IBM Watson&trade; Discovery is a cognitive search and content analytics engine that you "
        "can add to applications to identify patterns, trends and actionable insights to drive "
        "better decision-making."
    ),
    auth_key="discovery",
    default_url="https://gateway.watsonplatform.net/discovery/api",
    operations=OPERATIONS,
    versioned=True,
    confirm_running=True,
)
