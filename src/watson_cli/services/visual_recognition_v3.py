"""Visual Recognition v3 operations."""

from __future__ import annotations

from watson_cli.registry import (
    Endpoint,
    Location,
    OperationSpec,
    ReturnKind,
    ServiceSpec,
    boolean,
    file_path,
    json_object,
    number,
    string,
    strings,
)

OPERATIONS = (
    OperationSpec(
        "classify",
        "Classify images",
        Endpoint("POST", "/v3/classify"),
        long_help="Classify images with built-in or custom classifiers.",
        flags=(
            file_path(
                "images_file",
                (
                    "An image file (.gif, .jpg, .png, .tif) or .zip file with images. Maximum "
                    "image size is 10 MB."
                ),
            ),
            string(
                "images_filename",
                "The filename for ImagesFile.",
                location=Location.FILENAME,
                wire="images_file",
            ),
            string(
                "images_file_content_type",
                "The content type of ImagesFile.",
                location=Location.CONTENT_TYPE,
                wire="images_file",
            ),
            string(
                "url",
                "The URL of an image (.gif, .jpg, .png, .tif) to analyze.",
                location=Location.FORM,
            ),
            number(
                "threshold",
                "The minimum score a class must have to be displayed in the response.",
                location=Location.FORM,
            ),
            strings("owners", "The categories of classifiers to apply.", location=Location.FORM),
            strings(
                "classifier_ids",
                (
                    "Which classifiers to apply. Overrides the **owners** parameter. You can "
                    "specify both custom and built-in classifier IDs."
                ),
                location=Location.FORM,
            ),
            string(
                "accept_language",
                "The desired language of parts of the response. See the response for details.",
                location=Location.HEADER,
                wire="Accept-Language",
            ),
        ),
    ),
    OperationSpec(
        "create-classifier",
        "Create a classifier",
        Endpoint("POST", "/v3/classifiers"),
        long_help=(
            "Train a new multi-faceted classifier on the uploaded image data. Create your custom "
            "classifier with positive or negative example training images. Include at least two "
            "sets of examples, either two positive example files or one positive and one negative "
            "file."
        ),
        flags=(
            string(
                "name",
                "The name of the new classifier. Encode special characters in UTF-8.",
                required=True,
                location=Location.FORM,
            ),
            json_object(
                "positive_examples",
                (
                    "A .zip file of images that depict the visual subject of a class in the new "
                    "classifier."
                ),
                uploads=True,
                required=True,
                wire="{key}_positive_examples",
            ),
            file_path(
                "negative_examples",
                (
                    "A .zip file of images that do not depict the visual subject of any of the "
                    "classes of the new classifier."
                ),
            ),
            string(
                "negative_examples_filename",
                "The filename for NegativeExamples.",
                location=Location.FILENAME,
                wire="negative_examples",
            ),
        ),
    ),
    OperationSpec(
        "list-classifiers",
        "Retrieve a list of classifiers",
        Endpoint("GET", "/v3/classifiers"),
        flags=(
            boolean(
                "verbose",
                (
                    "Specify `true` to return details about the classifiers. Omit this parameter "
                    "to return a brief list of classifiers."
                ),
            ),
        ),
    ),
    OperationSpec(
        "get-classifier",
        "Retrieve classifier details",
        Endpoint("GET", "/v3/classifiers/{classifier_id}"),
        long_help="Retrieve information about a custom classifier.",
        flags=(
            string("classifier_id", "The ID of the classifier.", required=True),
        ),
    ),
    OperationSpec(
        "update-classifier",
        "Update a classifier",
        Endpoint("POST", "/v3/classifiers/{classifier_id}"),
        long_help=(
            "Update a custom classifier by adding new positive or negative classes or by adding "
            "new images to existing classes. You must supply at least one set of positive or "
            "negative examples."
        ),
        flags=(
            string("classifier_id", "The ID of the classifier.", required=True),
            json_object(
                "positive_examples",
                (
                    "A .zip file of images that depict the visual subject of a class in the "
                    "classifier."
                ),
                uploads=True,
                wire="{key}_positive_examples",
            ),
            file_path(
                "negative_examples",
                (
                    "A .zip file of images that do not depict the visual subject of any of the "
                    "classes of the new classifier."
                ),
            ),
            string(
                "negative_examples_filename",
                "The filename for NegativeExamples.",
                location=Location.FILENAME,
                wire="negative_examples",
            ),
        ),
    ),
    OperationSpec(
        "delete-classifier",
        "Delete a classifier",
        Endpoint("DELETE", "/v3/classifiers/{classifier_id}"),
        flags=(
            string("classifier_id", "The ID of the classifier.", required=True),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "get-core-ml-model",
        "Retrieve a Core ML model of a classifier",
        Endpoint("GET", "/v3/classifiers/{classifier_id}/core_ml_model"),
        long_help=(
            "Download a Core ML model file (.mlmodel) of a custom classifier that returns "
            "<tt>'core_ml_enabled': true</tt> in the classifier details."
        ),
        flags=(
            string("classifier_id", "The ID of the classifier.", required=True),
        ),
        returns=ReturnKind.STREAM,
    ),
    OperationSpec(
        "delete-user-data",
        "Delete labeled data",
        Endpoint("DELETE", "/v3/user_data"),
        long_help=(
            "Deletes all data associated with a specified customer ID. The method has no effect "
            "if no data is associated with the customer ID. You associate a customer ID with data "
            "by passing the `X-Watson-Metadata` header with a request that passes data."
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
    id="visual-recognition-v3",
    aliases=("vr-v3",),
    short_help="Parent command for Visual Recognition",
    long_help=(
        "The IBM Watson&trade; Visual Recognition service uses deep learning algorithms to "
        "identify scenes and objects in images that you upload to the service. You can create and "
        "train a custom classifier to identify subjects that suit your needs."
    ),
    auth_key="visual_recognition",
    default_url="https://gateway.watsonplatform.net/visual-recognition/api",
    operations=OPERATIONS,
    versioned=True,
    confirm_running=True,
)
