"""Speech to Text v1 operations."""

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
    number,
    string,
    strings,
)

OPERATIONS = (
    OperationSpec(
        "list-models",
        "List models",
        Endpoint("GET", "/v1/models"),
        long_help=(
            "Lists all language models that are available for use with the service. The "
            "information includes the name of the model and its minimum sampling rate in Hertz, "
            "among other things. **See also:** [Languages and "
            "models](https://cloud.ibm.com/docs/services/speech-to-text?topic=speech-to-text-models#models)."
        ),
    ),
    OperationSpec(
        "get-model",
        "Get a model",
        Endpoint("GET", "/v1/models/{model_id}"),
        long_help=(
            "Gets information for a single specified language model that is available for use "
            "with the service. The information includes the name of the model and its minimum "
            "sampling rate in Hertz, among other things."
        ),
        flags=(
            string(
                "model_id",
                (
                    "The identifier of the model in the form of its name from the output of the "
                    "**Get a model** method."
                ),
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "recognize",
        "Recognize audio",
        Endpoint("POST", "/v1/recognize"),
        long_help=(
            "Sends audio and returns transcription results for a recognition request. You can "
            "pass a maximum of 100 MB and a minimum of 100 bytes of audio with a request."
        ),
        flags=(
            file_path("audio", "The audio to transcribe.", required=True, location=Location.RAW),
            string(
                "content_type",
                "The format (MIME type) of the audio.",
                location=Location.HEADER,
                wire="Content-Type",
            ),
            string(
                "model",
                "The identifier of the model that is to be used for the recognition request.",
                location=Location.QUERY,
            ),
            string(
                "language_customization_id",
                (
                    "The customization ID (GUID) of a custom language model that is to be used "
                    "with the recognition request."
                ),
                location=Location.QUERY,
            ),
            string(
                "acoustic_customization_id",
                (
                    "The customization ID (GUID) of a custom acoustic model that is to be used "
                    "with the recognition request."
                ),
                location=Location.QUERY,
            ),
            string(
                "base_model_version",
                (
                    "The version of the specified base model that is to be used with the "
                    "recognition request."
                ),
                location=Location.QUERY,
            ),
            number(
                "customization_weight",
                (
                    "If you specify the customization ID (GUID) of a custom language model with "
                    "the recognition request, the customization weight tells the service how much "
                    "weight to give to words from the custom language model compared to those "
                    "from the base model for the current request."
                ),
                location=Location.QUERY,
            ),
            integer(
                "inactivity_timeout",
                (
                    "The time in seconds after which, if only silence (no speech) is detected in "
                    "streaming audio, the connection is closed with a 400 error."
                ),
                location=Location.QUERY,
            ),
            strings(
                "keywords",
                (
                    "An array of keyword strings to spot in the audio. Each keyword string can "
                    "include one or more string tokens."
                ),
                location=Location.QUERY,
            ),
            number(
                "keywords_threshold",
                "A confidence value that is the lower bound for spotting a keyword.",
                location=Location.QUERY,
            ),
            integer(
                "max_alternatives",
                "The maximum number of alternative transcripts that the service is to return.",
                location=Location.QUERY,
            ),
            number(
                "word_alternatives_threshold",
                (
                    "A confidence value that is the lower bound for identifying a hypothesis as a "
                    "possible word alternative (also known as 'Confusion Networks')."
                ),
                location=Location.QUERY,
            ),
            boolean(
                "word_confidence",
                (
                    "If `true`, the service returns a confidence measure in the range of 0.0 to "
                    "1.0 for each word."
                ),
                location=Location.QUERY,
            ),
            boolean(
                "timestamps",
                (
                    "If `true`, the service returns time alignment for each word. By default, no "
                    "timestamps are returned."
                ),
                location=Location.QUERY,
            ),
            boolean(
                "profanity_filter",
                (
                    "If `true`, the service filters profanity from all output except for keyword "
                    "results by replacing inappropriate words with a series of asterisks."
                ),
                location=Location.QUERY,
            ),
            boolean(
                "smart_formatting",
                (
                    "If `true`, the service converts dates, times, series of digits and numbers, "
                    "phone numbers, currency values, and internet addresses into more readable, "
                    "conventional representations in the final transcript of a recognition "
                    "request."
                ),
                location=Location.QUERY,
            ),
            boolean(
                "speaker_labels",
                (
                    "If `true`, the response includes labels that identify which words were "
                    "spoken by which participants in a multi-person exchange."
                ),
                location=Location.QUERY,
            ),
            string(
                "customization_id",
                (
                    "**Deprecated.** Use the `language_customization_id` parameter to specify the "
                    "customization ID (GUID) of a custom language model that is to be used with "
                    "the recognition request."
                ),
                location=Location.QUERY,
            ),
            string(
                "grammar_name",
                "The name of a grammar that is to be used with the recognition request.",
                location=Location.QUERY,
            ),
            boolean(
                "redaction",
                "If `true`, the service redacts, or masks, numeric data from final transcripts.",
                location=Location.QUERY,
            ),
            boolean(
                "audio_metrics",
                (
                    "If `true`, requests detailed information about the signal characteristics of "
                    "the input audio."
                ),
                location=Location.QUERY,
            ),
        ),
    ),
    OperationSpec(
        "register-callback",
        "Register a callback",
        Endpoint("POST", "/v1/register_callback"),
        long_help=(
            "Registers a callback URL with the service for use with subsequent asynchronous "
            "recognition requests. The service attempts to register, or white-list, the callback "
            "URL if it is not already registered by sending a `GET` request to the callback URL."
        ),
        flags=(
            string(
                "callback_url",
                "An HTTP or HTTPS URL to which callback notifications are to be sent.",
                required=True,
                location=Location.QUERY,
            ),
            string(
                "user_secret",
                (
                    "A user-specified string that the service uses to generate the HMAC-SHA1 "
                    "signature that it sends via the `X-Callback-Signature` header."
                ),
                location=Location.QUERY,
            ),
        ),
    ),
    OperationSpec(
        "unregister-callback",
        "Unregister a callback",
        Endpoint("POST", "/v1/unregister_callback"),
        long_help=(
            "Unregisters a callback URL that was previously white-listed with a **Register a "
            "callback** request for use with the asynchronous interface. Once unregistered, the "
            "URL can no longer be used with asynchronous recognition requests."
        ),
        flags=(
            string(
                "callback_url",
                "The callback URL that is to be unregistered.",
                required=True,
                location=Location.QUERY,
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "create-job",
        "Create a job",
        Endpoint("POST", "/v1/recognitions"),
        long_help=(
            "Creates a job for a new asynchronous recognition request. The job is owned by the "
            "instance of the service whose credentials are used to create it."
        ),
        flags=(
            file_path("audio", "The audio to transcribe.", required=True, location=Location.RAW),
            string(
                "content_type",
                "The format (MIME type) of the audio.",
                location=Location.HEADER,
                wire="Content-Type",
            ),
            string(
                "model",
                "The identifier of the model that is to be used for the recognition request.",
                location=Location.QUERY,
            ),
            string(
                "callback_url",
                "A URL to which callback notifications are to be sent.",
                location=Location.QUERY,
            ),
            string(
                "events",
                (
                    "If the job includes a callback URL, a comma-separated list of notification "
                    "events to which to subscribe."
                ),
                location=Location.QUERY,
            ),
            string(
                "user_token",
                (
                    "If the job includes a callback URL, a user-specified string that the service "
                    "is to include with each callback notification for the job; the token allows "
                    "the user to maintain an internal mapping between jobs and notification "
                    "events."
                ),
                location=Location.QUERY,
            ),
            integer(
                "results_ttl",
                (
                    "The number of minutes for which the results are to be available after the "
                    "job has finished."
                ),
                location=Location.QUERY,
            ),
            string(
                "language_customization_id",
                (
                    "The customization ID (GUID) of a custom language model that is to be used "
                    "with the recognition request."
                ),
                location=Location.QUERY,
            ),
            string(
                "acoustic_customization_id",
                (
                    "The customization ID (GUID) of a custom acoustic model that is to be used "
                    "with the recognition request."
                ),
                location=Location.QUERY,
            ),
            string(
                "base_model_version",
                (
                    "The version of the specified base model that is to be used with the "
                    "recognition request."
                ),
                location=Location.QUERY,
            ),
            number(
                "customization_weight",
                (
                    "If you specify the customization ID (GUID) of a custom language model with "
                    "the recognition request, the customization weight tells the service how much "
                    "weight to give to words from the custom language model compared to those "
                    "from the base model for the current request."
                ),
                location=Location.QUERY,
            ),
            integer(
                "inactivity_timeout",
                (
                    "The time in seconds after which, if only silence (no speech) is detected in "
                    "streaming audio, the connection is closed with a 400 error."
                ),
                location=Location.QUERY,
            ),
            strings(
                "keywords",
                (
                    "An array of keyword strings to spot in the audio. Each keyword string can "
                    "include one or more string tokens."
                ),
                location=Location.QUERY,
            ),
            number(
                "keywords_threshold",
                "A confidence value that is the lower bound for spotting a keyword.",
                location=Location.QUERY,
            ),
            integer(
                "max_alternatives",
                "The maximum number of alternative transcripts that the service is to return.",
                location=Location.QUERY,
            ),
            number(
                "word_alternatives_threshold",
                (
                    "A confidence value that is the lower bound for identifying a hypothesis as a "
                    "possible word alternative (also known as 'Confusion Networks')."
                ),
                location=Location.QUERY,
            ),
            boolean(
                "word_confidence",
                (
                    "If `true`, the service returns a confidence measure in the range of 0.0 to "
                    "1.0 for each word."
                ),
                location=Location.QUERY,
            ),
            boolean(
                "timestamps",
                (
                    "If `true`, the service returns time alignment for each word. By default, no "
                    "timestamps are returned."
                ),
                location=Location.QUERY,
            ),
            boolean(
                "profanity_filter",
                (
                    "If `true`, the service filters profanity from all output except for keyword "
                    "results by replacing inappropriate words with a series of asterisks."
                ),
                location=Location.QUERY,
            ),
            boolean(
                "smart_formatting",
                (
                    "If `true`, the service converts dates, times, series of digits and numbers, "
                    "phone numbers, currency values, and internet addresses into more readable, "
                    "conventional representations in the final transcript of a recognition "
                    "request."
                ),
                location=Location.QUERY,
            ),
            boolean(
                "speaker_labels",
                (
                    "If `true`, the response includes labels that identify which words were "
                    "spoken by which participants in a multi-person exchange."
                ),
                location=Location.QUERY,
            ),
            string(
                "customization_id",
                (
                    "**Deprecated.** Use the `language_customization_id` parameter to specify the "
                    "customization ID (GUID) of a custom language model that is to be used with "
                    "the recognition request."
                ),
                location=Location.QUERY,
            ),
            string(
                "grammar_name",
                "The name of a grammar that is to be used with the recognition request.",
                location=Location.QUERY,
            ),
            boolean(
                "redaction",
                "If `true`, the service redacts, or masks, numeric data from final transcripts.",
                location=Location.QUERY,
            ),
            boolean(
                "processing_metrics",
                (
                    "If `true`, requests processing metrics about the service's transcription of "
                    "the input audio."
                ),
                location=Location.QUERY,
            ),
            number(
                "processing_metrics_interval",
                (
                    "Specifies the interval in real wall-clock seconds at which the service is to "
                    "return processing metrics."
                ),
                location=Location.QUERY,
            ),
            boolean(
                "audio_metrics",
                (
                    "If `true`, requests detailed information about the signal characteristics of "
                    "the input audio."
                ),
                location=Location.QUERY,
            ),
        ),
    ),
    OperationSpec(
        "check-jobs",
        "Check jobs",
        Endpoint("GET", "/v1/recognitions"),
        long_help=(
            "Returns the ID and status of the latest 100 outstanding jobs associated with the "
            "credentials with which it is called. The method also returns the creation and update "
            "times of each job, and, if a job was created with a callback URL and a user token, "
            "the user token for the job."
        ),
    ),
    OperationSpec(
        "check-job",
        "Check a job",
        Endpoint("GET", "/v1/recognitions/{id}"),
        long_help=(
            "Returns information about the specified job. The response always includes the status "
            "of the job and its creation and update times. If the status is `completed`, the "
            "response includes the results of the recognition request."
        ),
        flags=(
            string(
                "id",
                "The identifier of the asynchronous job that is to be used for the request.",
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "delete-job",
        "Delete a job",
        Endpoint("DELETE", "/v1/recognitions/{id}"),
        long_help=(
            "Deletes the specified job. You cannot delete a job that the service is actively "
            "processing. Once you delete a job, its results are no longer available. The service "
            "automatically deletes a job and its results when the time to live for the results "
            "expires."
        ),
        flags=(
            string(
                "id",
                "The identifier of the asynchronous job that is to be used for the request.",
                required=True,
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "create-language-model",
        "Create a custom language model",
        Endpoint("POST", "/v1/customizations"),
        long_help=(
            "Creates a new custom language model for a specified base model. The custom language "
            "model can be used only with the base model for which it is created. The model is "
            "owned by the instance of the service whose credentials are used to create it."
        ),
        flags=(
            string(
                "name",
                "A user-defined name for the new custom language model.",
                required=True,
            ),
            string(
                "base_model_name",
                (
                    "The name of the base language model that is to be customized by the new "
                    "custom language model."
                ),
                required=True,
            ),
            string(
                "dialect",
                (
                    "The dialect of the specified language that is to be used with the custom "
                    "language model."
                ),
            ),
            string("description", "A description of the new custom language model."),
        ),
    ),
    OperationSpec(
        "list-language-models",
        "List custom language models",
        Endpoint("GET", "/v1/customizations"),
        long_help=(
            "Lists information about all custom language models that are owned by an instance of "
            "the service. Use the `language` parameter to see all custom language models for the "
            "specified language. Omit the parameter to see all custom language models for all "
            "languages."
        ),
        flags=(
            string(
                "language",
                (
                    "The identifier of the language for which custom language or custom acoustic "
                    "models are to be returned (for example, `en-US`)."
                ),
            ),
        ),
    ),
    OperationSpec(
        "get-language-model",
        "Get a custom language model",
        Endpoint("GET", "/v1/customizations/{customization_id}"),
        long_help=(
            "Gets information about a specified custom language model. You must use credentials "
            "for the instance of the service that owns a model to list information about it."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom language model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "delete-language-model",
        "Delete a custom language model",
        Endpoint("DELETE", "/v1/customizations/{customization_id}"),
        long_help=(
            "Deletes an existing custom language model. The custom model cannot be deleted if "
            "another request, such as adding a corpus or grammar to the model, is currently being "
            "processed. You must use credentials for the instance of the service that owns a "
            "model to delete it."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom language model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "train-language-model",
        "Train a custom language model",
        Endpoint("POST", "/v1/customizations/{customization_id}/train"),
        long_help=(
            "Initiates the training of a custom language model with new resources such as "
            "corpora, grammars, and custom words. After adding, modifying, or deleting resources "
            "for a custom language model, use this method to begin the actual training of the "
            "model on the latest data."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom language model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
            string(
                "word_type_to_add",
                (
                    "The type of words from the custom language model's words resource on which "
                    "to train the model:* `all` (the default) trains the model on all new words, "
                    "regardless of whether they were extracted from corpora or grammars or were "
                    "added or modified by the user.* `user` trains the model only on new words "
                    "that were added or modified by the user directly."
                ),
                location=Location.QUERY,
            ),
            number(
                "customization_weight",
                "Specifies a customization weight for the custom language model.",
                location=Location.QUERY,
            ),
        ),
    ),
    OperationSpec(
        "reset-language-model",
        "Reset a custom language model",
        Endpoint("POST", "/v1/customizations/{customization_id}/reset"),
        long_help=(
            "Resets a custom language model by removing all corpora, grammars, and words from the "
            "model. Resetting a custom language model initializes the model to its state when it "
            "was first created. Metadata such as the name and language of the model are "
            "preserved, but the model's words resource is removed and must be re-created."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom language model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "upgrade-language-model",
        "Upgrade a custom language model",
        Endpoint("POST", "/v1/customizations/{customization_id}/upgrade_model"),
        long_help=(
            "Initiates the upgrade of a custom language model to the latest version of its base "
            "language model. The upgrade method is asynchronous. It can take on the order of "
            "minutes to complete depending on the amount of data in the custom model and the "
            "current load on the service."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom language model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "list-corpora",
        "List corpora",
        Endpoint("GET", "/v1/customizations/{customization_id}/corpora"),
        long_help=(
            "Lists information about all corpora from a custom language model. The information "
            "includes the total number of words and out-of-vocabulary (OOV) words, name, and "
            "status of each corpus. You must use credentials for the instance of the service that "
            "owns a model to list its corpora."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom language model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "add-corpus",
        "Add a corpus",
        Endpoint("POST", "/v1/customizations/{customization_id}/corpora/{corpus_name}"),
        long_help=(
            "Adds a single corpus text file of new training data to a custom language model. Use "
            "multiple requests to submit multiple corpus text files. You must use credentials for "
            "the instance of the service that owns a model to add a corpus to it."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom language model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
            string(
                "corpus_name",
                "The name of the new corpus for the custom language model.",
                required=True,
            ),
            file_path(
                "corpus_file",
                "A plain text file that contains the training data for the corpus.",
                required=True,
            ),
            boolean(
                "allow_overwrite",
                (
                    "If `true`, the specified corpus overwrites an existing corpus with the same "
                    "name."
                ),
                location=Location.QUERY,
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "get-corpus",
        "Get a corpus",
        Endpoint("GET", "/v1/customizations/{customization_id}/corpora/{corpus_name}"),
        long_help=(
            "Gets information about a corpus from a custom language model. The information "
            "includes the total number of words and out-of-vocabulary (OOV) words, name, and "
            "status of the corpus. You must use credentials for the instance of the service that "
            "owns a model to list its corpora."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom language model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
            string(
                "corpus_name",
                "The name of the corpus for the custom language model.",
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "delete-corpus",
        "Delete a corpus",
        Endpoint("DELETE", "/v1/customizations/{customization_id}/corpora/{corpus_name}"),
        long_help="Deletes an existing corpus from a custom language model.",
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom language model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
            string(
                "corpus_name",
                "The name of the corpus for the custom language model.",
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
            "Lists information about custom words from a custom language model. You can list all "
            "words from the custom model's words resource, only custom words that were added or "
            "modified by the user, or only out-of-vocabulary (OOV) words that were extracted from "
            "corpora or are recognized by grammars."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom language model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
            string(
                "word_type",
                (
                    "The type of words to be listed from the custom language model's words "
                    "resource:* `all` (the default) shows all words.* `user` shows only custom "
                    "words that were added or modified by the user directly.* `corpora` shows "
                    "only OOV that were extracted from corpora.* `grammars` shows only OOV words "
                    "that are recognized by grammars."
                ),
            ),
            string(
                "sort",
                (
                    "Indicates the order in which the words are to be listed, `alphabetical` or "
                    "by `count`."
                ),
            ),
        ),
    ),
    OperationSpec(
        "add-words",
        "Add custom words",
        Endpoint("POST", "/v1/customizations/{customization_id}/words"),
        long_help=(
            "Adds one or more custom words to a custom language model. The service populates the "
            "words resource for a custom model with out-of-vocabulary (OOV) words from each "
            "corpus or grammar that is added to the model. You can use this method to add "
            "additional words or to modify existing words in the words resource."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom language model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
            json_array(
                "words",
                (
                    "An array of `CustomWord` objects that provides information about each custom "
                    "word that is to be added to or updated in the custom language model."
                ),
                required=True,
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "add-word",
        "Add a custom word",
        Endpoint("PUT", "/v1/customizations/{customization_id}/words/{word_name}"),
        long_help=(
            "Adds a custom word to a custom language model. The service populates the words "
            "resource for a custom model with out-of-vocabulary (OOV) words from each corpus or "
            "grammar that is added to the model. You can use this method to add a word or to "
            "modify an existing word in the words resource."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom language model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
            string(
                "word_name",
                (
                    "The custom word that is to be added to or updated in the custom language "
                    "model. Do not include spaces in the word."
                ),
                required=True,
            ),
            string(
                "word",
                (
                    "For the **Add custom words** method, you must specify the custom word that "
                    "is to be added to or updated in the custom model."
                ),
            ),
            strings("sounds_like", "An array of sounds-like pronunciations for the custom word."),
            string(
                "display_as",
                "An alternative spelling for the custom word when it appears in a transcript.",
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "get-word",
        "Get a custom word",
        Endpoint("GET", "/v1/customizations/{customization_id}/words/{word_name}"),
        long_help=(
            "Gets information about a custom word from a custom language model. You must use "
            "credentials for the instance of the service that owns a model to list information "
            "about its words."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom language model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
            string(
                "word_name",
                "The custom word that is to be read from the custom language model.",
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "delete-word",
        "Delete a custom word",
        Endpoint("DELETE", "/v1/customizations/{customization_id}/words/{word_name}"),
        long_help=(
            "Deletes a custom word from a custom language model. You can remove any word that you "
            "added to the custom model's words resource via any means. However, if the word also "
            "exists in the service's base vocabulary, the service removes only the custom "
            "pronunciation for the word; the word remains in the base vocabulary."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom language model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
            string(
                "word_name",
                "The custom word that is to be deleted from the custom language model.",
                required=True,
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "list-grammars",
        "List grammars",
        Endpoint("GET", "/v1/customizations/{customization_id}/grammars"),
        long_help=(
            "Lists information about all grammars from a custom language model. The information "
            "includes the total number of out-of-vocabulary (OOV) words, name, and status of each "
            "grammar. You must use credentials for the instance of the service that owns a model "
            "to list its grammars."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom language model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "add-grammar",
        "Add a grammar",
        Endpoint("POST", "/v1/customizations/{customization_id}/grammars/{grammar_name}"),
        long_help=(
            "Adds a single grammar file to a custom language model. Submit a plain text file in "
            "UTF-8 format that defines the grammar. Use multiple requests to submit multiple "
            "grammar files. You must use credentials for the instance of the service that owns a "
            "model to add a grammar to it."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom language model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
            string(
                "grammar_name",
                "The name of the new grammar for the custom language model.",
                required=True,
            ),
            file_path(
                "grammar_file",
                (
                    "A plain text file that contains the grammar in the format specified by the "
                    "`Content-Type` header."
                ),
                required=True,
                location=Location.RAW,
            ),
            string(
                "content_type",
                (
                    "The format (MIME type) of the grammar file:* `application/srgs` for "
                    "Augmented Backus-Naur Form (ABNF), which uses a plain-text representation "
                    "that is similar to traditional BNF grammars.* `application/srgs+xml` for XML "
                    "Form, which uses XML elements to represent the grammar."
                ),
                required=True,
                location=Location.HEADER,
                wire="Content-Type",
            ),
            boolean(
                "allow_overwrite",
                (
                    "If `true`, the specified grammar overwrites an existing grammar with the "
                    "same name."
                ),
                location=Location.QUERY,
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "get-grammar",
        "Get a grammar",
        Endpoint("GET", "/v1/customizations/{customization_id}/grammars/{grammar_name}"),
        long_help=(
            "Gets information about a grammar from a custom language model. The information "
            "includes the total number of out-of-vocabulary (OOV) words, name, and status of the "
            "grammar. You must use credentials for the instance of the service that owns a model "
            "to list its grammars."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom language model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
            string(
                "grammar_name",
                "The name of the grammar for the custom language model.",
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "delete-grammar",
        "Delete a grammar",
        Endpoint("DELETE", "/v1/customizations/{customization_id}/grammars/{grammar_name}"),
        long_help="Deletes an existing grammar from a custom language model.",
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom language model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
            string(
                "grammar_name",
                "The name of the grammar for the custom language model.",
                required=True,
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "create-acoustic-model",
        "Create a custom acoustic model",
        Endpoint("POST", "/v1/acoustic_customizations"),
        long_help=(
            "Creates a new custom acoustic model for a specified base model. The custom acoustic "
            "model can be used only with the base model for which it is created. The model is "
            "owned by the instance of the service whose credentials are used to create it."
        ),
        flags=(
            string(
                "name",
                "A user-defined name for the new custom acoustic model.",
                required=True,
            ),
            string(
                "base_model_name",
                (
                    "The name of the base language model that is to be customized by the new "
                    "custom acoustic model."
                ),
                required=True,
            ),
            string("description", "A description of the new custom acoustic model."),
        ),
    ),
    OperationSpec(
        "list-acoustic-models",
        "List custom acoustic models",
        Endpoint("GET", "/v1/acoustic_customizations"),
        long_help=(
            "Lists information about all custom acoustic models that are owned by an instance of "
            "the service. Use the `language` parameter to see all custom acoustic models for the "
            "specified language. Omit the parameter to see all custom acoustic models for all "
            "languages."
        ),
        flags=(
            string(
                "language",
                (
                    "The identifier of the language for which custom language or custom acoustic "
                    "models are to be returned (for example, `en-US`)."
                ),
            ),
        ),
    ),
    OperationSpec(
        "get-acoustic-model",
        "Get a custom acoustic model",
        Endpoint("GET", "/v1/acoustic_customizations/{customization_id}"),
        long_help=(
            "Gets information about a specified custom acoustic model. You must use credentials "
            "for the instance of the service that owns a model to list information about it."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom acoustic model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "delete-acoustic-model",
        "Delete a custom acoustic model",
        Endpoint("DELETE", "/v1/acoustic_customizations/{customization_id}"),
        long_help=(
            "Deletes an existing custom acoustic model. The custom model cannot be deleted if "
            "another request, such as adding an audio resource to the model, is currently being "
            "processed. You must use credentials for the instance of the service that owns a "
            "model to delete it."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom acoustic model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "train-acoustic-model",
        "Train a custom acoustic model",
        Endpoint("POST", "/v1/acoustic_customizations/{customization_id}/train"),
        long_help=(
            "Initiates the training of a custom acoustic model with new or changed audio "
            "resources. After adding or deleting audio resources for a custom acoustic model, use "
            "this method to begin the actual training of the model on the latest audio data. The "
            "custom acoustic model does not reflect its changed data until you train it."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom acoustic model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
            string(
                "custom_language_model_id",
                (
                    "The customization ID (GUID) of a custom language model that is to be used "
                    "during training of the custom acoustic model."
                ),
                location=Location.QUERY,
            ),
        ),
    ),
    OperationSpec(
        "reset-acoustic-model",
        "Reset a custom acoustic model",
        Endpoint("POST", "/v1/acoustic_customizations/{customization_id}/reset"),
        long_help=(
            "Resets a custom acoustic model by removing all audio resources from the model. "
            "Resetting a custom acoustic model initializes the model to its state when it was "
            "first created. Metadata such as the name and language of the model are preserved, "
            "but the model's audio resources are removed and must be re-created."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom acoustic model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "upgrade-acoustic-model",
        "Upgrade a custom acoustic model",
        Endpoint("POST", "/v1/acoustic_customizations/{customization_id}/upgrade_model"),
        long_help=(
            "Initiates the upgrade of a custom acoustic model to the latest version of its base "
            "language model. The upgrade method is asynchronous."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom acoustic model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
            string(
                "custom_language_model_id",
                (
                    "If the custom acoustic model was trained with a custom language model, the "
                    "customization ID (GUID) of that custom language model."
                ),
                location=Location.QUERY,
            ),
            boolean(
                "force",
                (
                    "If `true`, forces the upgrade of a custom acoustic model for which no input "
                    "data has been modified since it was last trained."
                ),
                location=Location.QUERY,
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "list-audio",
        "List audio resources",
        Endpoint("GET", "/v1/acoustic_customizations/{customization_id}/audio"),
        long_help=(
            "Lists information about all audio resources from a custom acoustic model. The "
            "information includes the name of the resource and information about its audio data, "
            "such as its duration."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom acoustic model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "add-audio",
        "Add an audio resource",
        Endpoint("POST", "/v1/acoustic_customizations/{customization_id}/audio/{audio_name}"),
        long_help=(
            "Adds an audio resource to a custom acoustic model. Add audio content that reflects "
            "the acoustic characteristics of the audio that you plan to transcribe. You must use "
            "credentials for the instance of the service that owns a model to add an audio "
            "resource to it."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom acoustic model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
            string(
                "audio_name",
                "The name of the new audio resource for the custom acoustic model.",
                required=True,
            ),
            file_path(
                "audio_resource",
                (
                    "The audio resource that is to be added to the custom acoustic model, an "
                    "individual audio file or an archive file."
                ),
                required=True,
                location=Location.RAW,
            ),
            string(
                "content_type",
                "For an audio-type resource, the format (MIME type) of the audio.",
                location=Location.HEADER,
                wire="Content-Type",
            ),
            string(
                "contained_content_type",
                (
                    "**For an archive-type resource,** specify the format of the audio files that "
                    "are contained in the archive file if they are of type `audio/alaw`, "
                    "`audio/basic`, `audio/l16`, or `audio/mulaw`."
                ),
                location=Location.HEADER,
                wire="Contained-Content-Type",
            ),
            boolean(
                "allow_overwrite",
                (
                    "If `true`, the specified audio resource overwrites an existing audio "
                    "resource with the same name."
                ),
                location=Location.QUERY,
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "get-audio",
        "Get an audio resource",
        Endpoint("GET", "/v1/acoustic_customizations/{customization_id}/audio/{audio_name}"),
        long_help="Gets information about an audio resource from a custom acoustic model.",
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom acoustic model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
            string(
                "audio_name",
                "The name of the audio resource for the custom acoustic model.",
                required=True,
            ),
        ),
    ),
    OperationSpec(
        "delete-audio",
        "Delete an audio resource",
        Endpoint("DELETE", "/v1/acoustic_customizations/{customization_id}/audio/{audio_name}"),
        long_help=(
            "Deletes an existing audio resource from a custom acoustic model. Deleting an "
            "archive-type audio resource removes the entire archive of files. The service does "
            "not allow deletion of individual files from an archive resource."
        ),
        flags=(
            string(
                "customization_id",
                (
                    "The customization ID (GUID) of the custom acoustic model that is to be used "
                    "for the request."
                ),
                required=True,
            ),
            string(
                "audio_name",
                "The name of the audio resource for the custom acoustic model.",
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
    id="speech-to-text-v1",
    aliases=("stt-v1",),
    short_help="Parent command for Speech to Text",
    long_help=(
        "The IBM&reg; Speech to Text service provides APIs that use IBM's speech-recognition "
        "capabilities to produce transcripts of spoken audio. The service can transcribe speech "
        "from various languages and audio formats."
    ),
    auth_key="speech_to_text",
    default_url="https://stream.watsonplatform.net/speech-to-text/api",
    operations=OPERATIONS,
)
