"""Language Translator v3 operations."""

from __future__ import annotations

from watson_cli.registry import (
    Endpoint,
    Location,
    OperationSpec,
    ReturnKind,
    ServiceSpec,
    boolean,
    file_path,
    string,
    strings,
)

OPERATIONS = (
    OperationSpec(
        "translate",
        "Translate",
        Endpoint("POST", "/v3/translate"),
        long_help="Translates the input text from the source language to the target language.",
        flags=(
            strings(
                "text",
                (
                    "Input text in UTF-8 encoding. Multiple entries will result in multiple "
                    "translations in the response."
                ),
                required=True,
            ),
            string(
                "model_id",
                (
                    "A globally unique string that identifies the underlying model that is used "
                    "for translation."
                ),
            ),
            string("source", "Translation source language code."),
            string("target", "Translation target language code."),
        ),
    ),
    OperationSpec(
        "list-identifiable-languages",
        "List identifiable languages",
        Endpoint("GET", "/v3/identifiable_languages"),
        long_help=(
            "Lists the languages that the service can identify. Returns the language code (for "
            "example, `en` for English or `es` for Spanish) and name of each language."
        ),
    ),
    OperationSpec(
        "identify",
        "Identify language",
        Endpoint("POST", "/v3/identify", headers=(("Content-Type", "text/plain"),)),
        long_help="Identifies the language of the input text.",
        flags=(
            string("text", "Input text in UTF-8 format.", required=True, location=Location.RAW),
        ),
    ),
    OperationSpec(
        "list-models",
        "List models",
        Endpoint("GET", "/v3/models"),
        long_help="Lists available translation models.",
        flags=(
            string("source", "Specify a language code to filter results by source language."),
            string("target", "Specify a language code to filter results by target language."),
            boolean(
                "default",
                (
                    "If the default parameter isn't specified, the service will return all models "
                    "(default and non-default) for each language pair."
                ),
            ),
        ),
    ),
    OperationSpec(
        "create-model",
        "Create model",
        Endpoint("POST", "/v3/models"),
        long_help=(
            "Uploads Translation Memory eXchange (TMX) files to customize a translation model.You "
            "can either customize a model with a forced glossary or with a corpus that contains "
            "parallel sentences."
        ),
        flags=(
            string(
                "base_model_id",
                (
                    "The model ID of the model to use as the base for customization. To see "
                    "available models, use the `List models` method."
                ),
                required=True,
                location=Location.QUERY,
            ),
            file_path("forced_glossary", "A TMX file with your customizations."),
            file_path(
                "parallel_corpus",
                "A TMX file with parallel sentences for source and target language.",
            ),
            string(
                "name",
                "An optional model name that you can use to identify the model.",
                location=Location.QUERY,
            ),
        ),
    ),
    OperationSpec(
        "delete-model",
        "Delete model",
        Endpoint("DELETE", "/v3/models/{model_id}"),
        long_help="Deletes a custom translation model.",
        flags=(
            string("model_id", "Model ID of the model to delete.", required=True),
        ),
    ),
    OperationSpec(
        "get-model",
        "Get model details",
        Endpoint("GET", "/v3/models/{model_id}"),
        long_help=(
            "Gets information about a translation model, including training status for custom "
            "models. Use this API call to poll the status of your customization request. A "
            "successfully completed training will have a status of `available`."
        ),
        flags=(
            string("model_id", "Model ID of the model to get.", required=True),
        ),
    ),
    OperationSpec(
        "list-documents",
        "List documents",
        Endpoint("GET", "/v3/documents"),
        long_help="Lists documents that have been submitted for translation.",
    ),
    OperationSpec(
        "translate-document",
        "Translate document",
        Endpoint("POST", "/v3/documents"),
        long_help=(
            "Submit a document for translation. You can submit the document contents in the "
            "`file` parameter, or you can reference a previously submitted document by document "
            "ID."
        ),
        flags=(
            file_path(
                "file",
                (
                    "The source file to translate.[Supported file "
                    "types](https://cloud.ibm.com/docs/services/language-translator?topic=language-translator-document-translator-tutorial#supported-file-formats)Maximum "
                    "file size: **20 MB**."
                ),
                required=True,
            ),
            string(
                "filename",
                "The filename for File.",
                required=True,
                location=Location.FILENAME,
                wire="file",
            ),
            string(
                "file_content_type",
                "The content type of File.",
                location=Location.CONTENT_TYPE,
                wire="file",
            ),
            string(
                "model_id",
                (
                    "The model to use for translation. `model_id` or both `source` and `target` "
                    "are required."
                ),
            ),
            string("source", "Language code that specifies the language of the source document."),
            string("target", "Language code that specifies the target language for translation."),
            string(
                "document_id",
                (
                    "To use a previously submitted document as the source for a new translation, "
                    "enter the `document_id` of the document."
                ),
            ),
        ),
    ),
    OperationSpec(
        "get-document-status",
        "Get document status",
        Endpoint("GET", "/v3/documents/{document_id}"),
        long_help="Gets the translation status of a document.",
        flags=(
            string("document_id", "The document ID of the document.", required=True),
        ),
    ),
    OperationSpec(
        "delete-document",
        "Delete document",
        Endpoint("DELETE", "/v3/documents/{document_id}"),
        long_help="Deletes a document.",
        flags=(
            string("document_id", "Document ID of the document to delete.", required=True),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "get-translated-document",
        "Get translated document",
        Endpoint("GET", "/v3/documents/{document_id}/translated_document"),
        long_help="Gets the translated document associated with the given document ID.",
        flags=(
            string(
                "document_id",
                "The document ID of the document that was submitted for translation.",
                required=True,
            ),
            string(
                "accept",
                (
                    "The type of the response: application/powerpoint, application/mspowerpoint, "
                    "application/x-rtf, application/json, application/xml, "
                    "application/vnd.ms-excel, "
                    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet, "
                    "application/vnd.ms-powerpoint, "
                    "application/vnd.openxmlformats-officedocument.presentationml.presentation, "
                    "application/msword, "
                    "application/vnd.openxmlformats-officedocument.wordprocessingml.document, "
                    "application/vnd.oasis.opendocument.spreadsheet, "
                    "application/vnd.oasis.opendocument.presentation, "
                    "application/vnd.oasis.opendocument.text, application/pdf, application/rtf, "
                    "text/html, text/json, text/plain, text/richtext, text/rtf, or text/xml."
                ),
                location=Location.HEADER,
                wire="Accept",
            ),
        ),
        returns=ReturnKind.STREAM,
    ),
)

SERVICE = ServiceSpec(
    id="language-translator-v3",
    aliases=("lt-v3",),
    short_help="Parent command for Language Translator",
    long_help=(
        "IBM Watson&trade; Language Translator translates text from one language to another. The "
        "service offers multiple IBM provided translation models that you can customize based on "
        "your unique terminology and language."
    ),
    auth_key="language_translator",
    default_url="https://gateway.watsonplatform.net/language-translator/api",
    operations=OPERATIONS,
    versioned=True,
    confirm_running=True,
)
