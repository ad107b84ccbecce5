"""Visual Recognition v4 operations."""

from __future__ import annotations

from watson_cli.registry import (
    Endpoint,
    Location,
    OperationSpec,
    ReturnKind,
    ServiceSpec,
    json_array,
    number,
    string,
    strings,
)

OPERATIONS = (
    OperationSpec(
        "analyze",
        "Analyze images",
        Endpoint("POST", "/v4/analyze"),
        long_help=(
            "Analyze images by URL, by file, or both against your own collection. Make sure that "
            "**training_status.objects.ready** is `true` for the feature before you use a "
            "collection to analyze images.Encode the image and .zip file names in UTF-8 if they "
            "contain non-ASCII characters."
        ),
        flags=(
            strings(
                "collection_ids",
                "The IDs of the collections to analyze.",
                required=True,
                location=Location.FORM,
            ),
            strings("features", "The features to analyze.", required=True, location=Location.FORM),
            json_array(
                "images_file",
                (
                    "An array of image files (.jpg or .png) or .zip files with images.- Include a "
                    "maximum of 20 images in a request.- Limit the .zip file to 100 MB.- Limit "
                    "each image file to 10 MB.You can also include an image with the "
                    "**image_url** parameter."
                ),
                uploads=True,
            ),
            strings(
                "image_url",
                (
                    "An array of URLs of image files (.jpg or .png).- Include a maximum of 20 "
                    "images in a request.- Limit each image file to 10 MB.- Minimum width and "
                    "height is 30 pixels, but the service tends to perform better with images "
                    "that are at least 300 x 300 pixels."
                ),
                location=Location.FORM,
            ),
            number(
                "threshold",
                "The minimum score a feature must have to be returned.",
                location=Location.FORM,
            ),
        ),
    ),
    OperationSpec(
        "create-collection",
        "Create a collection",
        Endpoint("POST", "/v4/collections"),
        long_help=(
            "Create a collection that can be used to store images.To create a collection without "
            "specifying a name and description, include an empty JSON object in the request "
            "body.Encode the name and description in UTF-8 if they contain non-ASCII characters. "
            "The service assumes UTF-8 encoding if it encounters non-ASCII characters."
        ),
        flags=(
            string(
                "name",
                (
                    "The name of the collection. The name can contain alphanumeric, underscore, "
                    "hyphen, and dot characters."
                ),
            ),
            string("description", "The description of the collection."),
        ),
    ),
    OperationSpec(
        "list-collections",
        "List collections",
        Endpoint("GET", "/v4/collections"),
        long_help="Retrieves a list of collections for the service instance.",
    ),
    OperationSpec(
        "get-collection",
        "Get collection details",
        Endpoint("GET", "/v4/collections/{collection_id}"),
        long_help="Get details of one collection.",
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
        ),
    ),
    OperationSpec(
        "update-collection",
        "Update a collection",
        Endpoint("POST", "/v4/collections/{collection_id}"),
        long_help=(
            "Update the name or description of a collection.Encode the name and description in "
            "UTF-8 if they contain non-ASCII characters. The service assumes UTF-8 encoding if it "
            "encounters non-ASCII characters."
        ),
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
            string(
                "name",
                (
                    "The name of the collection. The name can contain alphanumeric, underscore, "
                    "hyphen, and dot characters."
                ),
            ),
            string("description", "The description of the collection."),
        ),
    ),
    OperationSpec(
        "delete-collection",
        "Delete a collection",
        Endpoint("DELETE", "/v4/collections/{collection_id}"),
        long_help="Delete a collection from the service instance.",
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "add-images",
        "Add images",
        Endpoint("POST", "/v4/collections/{collection_id}/images"),
        long_help=(
            "Add images to a collection by URL, by file, or both.Encode the image and .zip file "
            "names in UTF-8 if they contain non-ASCII characters. The service assumes UTF-8 "
            "encoding if it encounters non-ASCII characters."
        ),
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
            json_array(
                "images_file",
                (
                    "An array of image files (.jpg or .png) or .zip files with images.- Include a "
                    "maximum of 20 images in a request.- Limit the .zip file to 100 MB.- Limit "
                    "each image file to 10 MB.You can also include an image with the "
                    "**image_url** parameter."
                ),
                uploads=True,
            ),
            strings(
                "image_url",
                (
                    "The array of URLs of image files (.jpg or .png).- Include a maximum of 20 "
                    "images in a request.- Limit each image file to 10 MB.- Minimum width and "
                    "height is 30 pixels, but the service tends to perform better with images "
                    "that are at least 300 x 300 pixels."
                ),
                location=Location.FORM,
            ),
            string("training_data", "Training data for a single image.", location=Location.FORM),
        ),
    ),
    OperationSpec(
        "list-images",
        "List images",
        Endpoint("GET", "/v4/collections/{collection_id}/images"),
        long_help="Retrieves a list of images in a collection.",
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
        ),
    ),
    OperationSpec(
        "get-image-details",
        "Get image details",
        Endpoint("GET", "/v4/collections/{collection_id}/images/{image_id}"),
        long_help="Get the details of an image in a collection.",
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
            string("image_id", "The identifier of the image.", required=True),
        ),
    ),
    OperationSpec(
        "delete-image",
        "Delete an image",
        Endpoint("DELETE", "/v4/collections/{collection_id}/images/{image_id}"),
        long_help="Delete one image from a collection.",
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
            string("image_id", "The identifier of the image.", required=True),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "get-jpeg-image",
        "Get a JPEG file of an image",
        Endpoint("GET", "/v4/collections/{collection_id}/images/{image_id}/jpeg"),
        long_help="Download a JPEG representation of an image.",
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
            string("image_id", "The identifier of the image.", required=True),
            string("size", "Specify the image size."),
        ),
        returns=ReturnKind.STREAM,
    ),
    OperationSpec(
        "train",
        "Train a collection",
        Endpoint("POST", "/v4/collections/{collection_id}/train"),
        long_help=(
            "Start training on images in a collection. The collection must have enough training "
            "data and untrained data (the **training_status.objects.data_changed** is `true`). If "
            "training is in progress, the request queues the next training job."
        ),
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
        ),
    ),
    OperationSpec(
        "add-image-training-data",
        "Add training data to an image",
        Endpoint("POST", "/v4/collections/{collection_id}/images/{image_id}/training_data"),
        long_help=(
            "Add, update, or delete training data for an image. Encode the object name in UTF-8 "
            "if it contains non-ASCII characters."
        ),
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
            string("image_id", "The identifier of the image.", required=True),
            json_array("objects", "Training data for specific objects."),
        ),
    ),
    OperationSpec(
        "delete-user-data",
        "Delete labeled data",
        Endpoint("DELETE", "/v4/user_data"),
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
    id="visual-recognition-v4",
    aliases=("vr-v4",),
    short_help="Parent command for Visual Recognition v4",
    long_help=(
        "Provide images to the IBM Watson&trade; Visual Recognition service for analysis. The "
        "service detects objects based on a set of images with training data.**Beta:** The Visual "
        "Recognition v4 API and Object Detection model are beta features."
    ),
    auth_key="visual_recognition_v4",
    default_url="https://gateway.watsonplatform.net/visual-recognition/api",
    operations=OPERATIONS,
    versioned=True,
)
