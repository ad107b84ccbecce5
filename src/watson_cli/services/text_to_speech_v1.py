"""Text to Speech v1 operations."""

from __future__ import annotations

from watson_cli.registry import (
    Endpoint,
    Location,
    OperationSpec,
    ReturnKind,
    ServiceSpec,
    json_array,
    string,
)

OPERATIONS = (
    OperationSpec(
        "list-voices",
        "List voices",
        Endpoint("GET", "/v1/voices"),
        long_help=(
            "Lists all voices available for use with the service. The information includes the "
            "name, language, gender, and other details about the voice. To see information about "
            "a specific voice, use the **Get a voice** method."
        ),
    ),
    OperationSpec(
        "get-voice",
        "Get a voice",
        Endpoint("GET", "/v1/voices/{voice}"),
        long_help=(
            "Gets information about the specified voice. The information includes the name, "
            "language, gender, and other details about the voice. Specify a customization ID to "
            "obtain information for a custom voice model that is defined for the language of the "
            "specified voice."
        ),
        flags=(
            string("voice", "The voice for which information is to be returned.", required=True),
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of a custom voice model for which information is "
                    "to be returned."
                ),
            ),
        ),
    ),
    OperationSpec(
        "synthesize",
        "Synthesize audio",
        Endpoint("POST", "/v1/synthesize"),
        long_help=(
            "Synthesizes text to audio that is spoken in the specified voice. The service bases "
            "its understanding of the language for the input text on the specified voice. Use a "
            "voice that matches the language of the input text."
        ),
        flags=(
            string("text", "The text to synthesize.", required=True),
            string(
                "accept",
                "The requested format (MIME type) of the audio.",
                location=Location.HEADER,
                wire="Accept",
            ),
            string("voice", "The voice to use for synthesis.", location=Location.QUERY),
            string(
                "customization_id",
                "The customization ID (GUID) of a custom voice model to use for the synthesis.",
                location=Location.QUERY,
            ),
        ),
        returns=ReturnKind.STREAM,
    ),
    OperationSpec(
        "get-pronunciation",
        "Get pronunciation",
        Endpoint("GET", "/v1/pronunciation"),
        long_help=(
            "Gets the phonetic pronunciation for the specified word. You can request the "
            "pronunciation for a specific format. You can also request the pronunciation for a "
            "specific voice to see the default translation for the language of that voice or for "
            "a specific custom voice model to see the translation for that voice model."
        ),
        flags=(
            string("text", "The word for which the pronunciation is requested.", required=True),
            string(
                "voice",
                (
                    "A voice that specifies the language in which the pronunciation is to be "
                    "returned."
                ),
            ),
            string("format", "The phoneme format in which to return the pronunciation."),
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of a custom voice model for which the "
                    "pronunciation is to be returned."
                ),
            ),
        ),
    ),
    OperationSpec(
        "create-voice-model",
        "Create a custom model",
        Endpoint("POST", "/v1/customizations"),
        long_help=(
            "Creates a new empty custom voice model. You must specify a name for the new custom "
            "model. You can optionally specify the language and a description for the new model. "
            "The model is owned by the instance of the service whose credentials are used to "
            "create it. **Note:** This method is currently a beta release."
        ),
        flags=(
            string("name", "The name of the new custom voice model.", required=True),
            string(
                "language",
                (
                    "The language of the new custom voice model. Omit the parameter to use the "
                    "the default language, `en-US`."
                ),
            ),
            string(
                "description",
                (
                    "A description of the new custom voice model. Specifying a description is "
                    "recommended."
                ),
            ),
        ),
    ),
    OperationSpec(
        "list-voice-models",
        "List custom models",
        Endpoint("GET", "/v1/customizations"),
        long_help=(
            "Lists metadata such as the name and description for all custom voice models that are "
            "owned by an instance of the service. Specify a language to list the voice models for "
            "that language only. To see the words in addition to the metadata for a specific "
            "voice model, use the **List a custom model** method."
        ),
        flags=(
            string(
                "language",
                (
                    "The language for which custom voice models that are owned by the requesting "
                    "credentials are to be returned."
                ),
            ),
        ),
    ),
    OperationSpec(
        "update-voice-model",
        "Update a custom model",
        Endpoint("POST", "/v1/customizations/{customization_id}"),
        long_help=(
            "Updates information for the specified custom voice model. You can update metadata "
            "such as the name and description of the voice model. You can also update the words "
            "in the model and their translations. Adding a new translation for a word that "
            "already exists in a custom model overwrites the word's existing translation."
        ),
        flags=(
            string(
                "customization_id",
                "The customization ID (GUID) of the custom voice model.",
                required=True,
            ),
            string("name", "A new name for the custom voice model."),
            string("description", "A new description for the custom voice model."),
            json_array(
                "words",
                (
                    "An array of `Word` objects that provides the words and their translations "
                    "that are to be added or updated for the custom voice model."
                ),
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "get-voice-model",
        "Get a custom model",
        Endpoint("GET", "/v1/customizations/{customization_id}"),
        long_help=(
            "Gets all information about a specified custom voice model. In addition to metadata "
            "such as the name and description of the voice model, the output includes the words "
            "and their translations as defined in the model. To see just the metadata for a voice "
            "model, use the **List custom models** method."
        ),
        flags=(
            string(
                "customization_id",
                "The customization ID (GUID) of the custom voice model.",
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "delete-voice-model",
        "Delete a custom model",
        Endpoint("DELETE", "/v1/customizations/{customization_id}"),
        long_help=(
            "Deletes the specified custom voice model. You must use credentials for the instance "
            "of the service that owns a model to delete it. **Note:** This method is currently a "
            "beta release."
        ),
        flags=(
            string(
                "customization_id",
                "The customization ID (GUID) of the custom voice model.",
                required=True,
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "add-words",
        "Add custom words",
        Endpoint("POST", "/v1/customizations/{customization_id}/words"),
        long_help=(
            "Adds one or more words and their translations to the specified custom voice model. "
            "Adding a new translation for a word that already exists in a custom model overwrites "
            "the word's existing translation. A custom model can contain no more than 20,000 "
            "entries."
        ),
        flags=(
            string(
                "customization_id",
                "The customization ID (GUID) of the custom voice model.",
                required=True,
            ),
            json_array(
                "words",
                "The **Add custom words** method accepts an array of `Word` objects.",
                required=True,
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "list-words",
        "List custom words",
        Endpoint("GET", "/v1/customizations/{customization_id}/words"),
        long_help=(
            "Lists all of the words and their translations for the specified custom voice model. "
            "The output shows the translations as they are defined in the model. You must use "
            "credentials for the instance of the service that owns a model to list its words. "
            "**Note:** This method is currently a beta release."
        ),
        flags=(
            string(
                "customization_id",
                "The customization ID (GUID) of the custom voice model.",
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "add-word",
        "Add a custom word",
        Endpoint("PUT", "/v1/customizations/{customization_id}/words/{word}"),
        long_help=(
            "Adds a single word and its translation to the specified custom voice model. Adding a "
            "new translation for a word that already exists in a custom model overwrites the "
            "word's existing translation. A custom model can contain no more than 20,000 entries."
        ),
        flags=(
            string(
                "customization_id",
                "The customization ID (GUID) of the custom voice model.",
                required=True,
            ),
            string(
                "word",
                "The word that is to be added or updated for the custom voice model.",
                required=True,
            ),
            string(
                "translation",
                "The phonetic or sounds-like translation for the word.",
                required=True,
            ),
            string("part_of_speech", "**Japanese only.** The part of speech for the word."),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "get-word",
        "Get a custom word",
        Endpoint("GET", "/v1/customizations/{customization_id}/words/{word}"),
        long_help=(
            "Gets the translation for a single word from the specified custom model. The output "
            "shows the translation as it is defined in the model. You must use credentials for "
            "the instance of the service that owns a model to list its words. **Note:** This "
            "method is currently a beta release."
        ),
        flags=(
            string(
                "customization_id",
                "The customization ID (GUID) of the custom voice model.",
                required=True,
            ),
            string(
                "word",
                "The word that is to be queried from the custom voice model.",
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "delete-word",
        "Delete a custom word",
        Endpoint("DELETE", "/v1/customizations/{customization_id}/words/{word}"),
        long_help=(
            "Deletes a single word from the specified custom voice model. You must use "
            "credentials for the instance of the service that owns a model to delete its words. "
            "**Note:** This method is currently a beta release."
        ),
        flags=(
            string(
                "customization_id",
                "The customization ID (GUID) of the custom voice model.",
                required=True,
            ),
            string(
                "word",
                "The word that is to be deleted from the custom voice model.",
                required=True,
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "delete-user-data",
        "Delete labeled data",
        Endpoint("DELETE", "/v1/user_data"),
        long_help=(
            "Deletes all data that is associated with a specified customer ID. The method deletes "
            "all data for the customer ID, regardless of the method by which the information was "
            "added. The method has no effect if no data is associated with the customer ID."
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
)

SERVICE = ServiceSpec(
    id="text-to-speech-v1",
    aliases=("tts-v1",),
    short_help="Parent command for Text to Speech",
    long_help=(
        "The IBM&reg; Text to Speech service provides APIs that use IBM's speech-synthesis "
        "capabilities to synthesize text into natural-sounding speech in a variety of languages, "
        "dialects, and voices. The service supports at least one male or female voice, sometimes "
        "both, for each language."
    ),
    auth_key="text_to_speech",
    default_url="https://stream.watsonplatform.net/text-to-speech/api",
    operations=OPERATIONS,
)
