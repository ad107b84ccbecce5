"""Assistant v1 operations."""

from __future__ import annotations

from watson_cli.registry import (
    Endpoint,
    Location,
    OperationSpec,
    ReturnKind,
    ServiceSpec,
    boolean,
    integer,
    json_array,
    json_object,
    string,
    strings,
)

OPERATIONS = (
    OperationSpec(
        "message",
        "Get response to user input",
        Endpoint("POST", "/v1/workspaces/{workspace_id}/message"),
        long_help=(
            "Send user input to a workspace and receive a response.**Important:** This method has "
            "been superseded by the new v2 runtime API. The v2 API offers significant advantages, "
            "including ease of deployment, automatic state management, versioning, and search "
            "capabilities."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            json_object("input", "An input object that includes the input text."),
            json_array("intents", "Intents to use when evaluating the user input."),
            json_array("entities", "Entities to use when evaluating the message."),
            boolean(
                "alternate_intents",
                (
                    "Whether to return more than one intent. A value of `true` indicates that all "
                    "matching intents are returned."
                ),
            ),
            json_object(
                "context",
                (
                    "State information for the conversation. To maintain state, include the "
                    "context from the previous response."
                ),
            ),
            json_object(
                "message_output",
                (
                    "An output object that includes the response to the user, the dialog nodes "
                    "that were triggered, and messages from the log."
                ),
                wire="output",
            ),
            boolean(
                "nodes_visited_details",
                (
                    "Whether to include additional diagnostic information about the dialog nodes "
                    "that were visited during processing of the message."
                ),
                location=Location.QUERY,
            ),
        ),
    ),
    OperationSpec(
        "list-workspaces",
        "List workspaces",
        Endpoint("GET", "/v1/workspaces"),
        long_help=(
            "List the workspaces associated with a Watson Assistant service instance.This "
            "operation is limited to 500 requests per 30 minutes. For more information, see "
            "**Rate limiting**."
        ),
        flags=(
            integer("page_limit", "The number of records to return in each page of results."),
            string("sort", "The attribute by which returned workspaces will be sorted."),
            string("cursor", "A token identifying the page of results to retrieve."),
            boolean(
                "include_audit",
                (
                    "Whether to include the audit properties (`created` and `updated` timestamps) "
                    "in the response."
                ),
            ),
        ),
    ),
    OperationSpec(
        "create-workspace",
        "Create workspace",
        Endpoint("POST", "/v1/workspaces"),
        long_help=(
            "Create a workspace based on component objects. You must provide workspace components "
            "defining the content of the new workspace.This operation is limited to 30 requests "
            "per 30 minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string(
                "name",
                (
                    "The name of the workspace. This string cannot contain carriage return, "
                    "newline, or tab characters."
                ),
            ),
            string(
                "description",
                (
                    "The description of the workspace. This string cannot contain carriage "
                    "return, newline, or tab characters."
                ),
            ),
            string("language", "The language of the workspace."),
            json_object("metadata", "Any metadata related to the workspace."),
            boolean(
                "learning_opt_out",
                (
                    "Whether training data from the workspace (including artifacts such as "
                    "intents and entities) can be used by IBM for general service improvements."
                ),
            ),
            json_object("system_settings", "Global settings for the workspace."),
            json_array("intents", "An array of objects defining the intents for the workspace."),
            json_array(
                "entities",
                "An array of objects describing the entities for the workspace.",
            ),
            json_array(
                "dialog_nodes",
                "An array of objects describing the dialog nodes in the workspace.",
            ),
            json_array(
                "counterexamples",
                (
                    "An array of objects defining input examples that have been marked as "
                    "irrelevant input."
                ),
            ),
        ),
    ),
    OperationSpec(
        "get-workspace",
        "Get information about a workspace",
        Endpoint("GET", "/v1/workspaces/{workspace_id}"),
        long_help=(
            "Get information about a workspace, optionally including all workspace content.With "
            "**export**=`false`, this operation is limited to 6000 requests per 5 minutes. With "
            "**export**=`true`, the limit is 20 requests per 30 minutes. For more information, "
            "see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            boolean("export", "Whether to include all element content in the returned data."),
            boolean(
                "include_audit",
                (
                    "Whether to include the audit properties (`created` and `updated` timestamps) "
                    "in the response."
                ),
            ),
            string(
                "sort",
                (
                    "Indicates how the returned workspace data will be sorted. This parameter is "
                    "valid only if **export**=`true`."
                ),
            ),
        ),
    ),
    OperationSpec(
        "update-workspace",
        "Update workspace",
        Endpoint("POST", "/v1/workspaces/{workspace_id}"),
        long_help=(
            "Update an existing workspace with new or modified data. You must provide component "
            "objects defining the content of the updated workspace.This operation is limited to "
            "30 request per 30 minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string(
                "name",
                (
                    "The name of the workspace. This string cannot contain carriage return, "
                    "newline, or tab characters."
                ),
            ),
            string(
                "description",
                (
                    "The description of the workspace. This string cannot contain carriage "
                    "return, newline, or tab characters."
                ),
            ),
            string("language", "The language of the workspace."),
            json_object("metadata", "Any metadata related to the workspace."),
            boolean(
                "learning_opt_out",
                (
                    "Whether training data from the workspace (including artifacts such as "
                    "intents and entities) can be used by IBM for general service improvements."
                ),
            ),
            json_object("system_settings", "Global settings for the workspace."),
            json_array("intents", "An array of objects defining the intents for the workspace."),
            json_array(
                "entities",
                "An array of objects describing the entities for the workspace.",
            ),
            json_array(
                "dialog_nodes",
                "An array of objects describing the dialog nodes in the workspace.",
            ),
            json_array(
                "counterexamples",
                (
                    "An array of objects defining input examples that have been marked as "
                    "irrelevant input."
                ),
            ),
            boolean(
                "append",
                "Whether the new data is to be appended to the existing data in the workspace.",
                location=Location.QUERY,
            ),
        ),
    ),
    OperationSpec(
        "delete-workspace",
        "Delete workspace",
        Endpoint("DELETE", "/v1/workspaces/{workspace_id}"),
        long_help=(
            "Delete a workspace from the service instance.This operation is limited to 30 "
            "requests per 30 minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "list-intents",
        "List intents",
        Endpoint("GET", "/v1/workspaces/{workspace_id}/intents"),
        long_help=(
            "List the intents for a workspace.With **export**=`false`, this operation is limited "
            "to 2000 requests per 30 minutes. With **export**=`true`, the limit is 400 requests "
            "per 30 minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            boolean("export", "Whether to include all element content in the returned data."),
            integer("page_limit", "The number of records to return in each page of results."),
            string("sort", "The attribute by which returned intents will be sorted."),
            string("cursor", "A token identifying the page of results to retrieve."),
            boolean(
                "include_audit",
                (
                    "Whether to include the audit properties (`created` and `updated` timestamps) "
                    "in the response."
                ),
            ),
        ),
    ),
    OperationSpec(
        "create-intent",
        "Create intent",
        Endpoint("POST", "/v1/workspaces/{workspace_id}/intents"),
        long_help=(
            "Create a new intent.If you want to create multiple intents with a single API call, "
            "consider using the **[Update workspace](#update-workspace)** method instead.This "
            "operation is limited to 2000 requests per 30 minutes. For more information, see "
            "**Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("intent", "The name of the intent.", required=True),
            string(
                "description",
                (
                    "The description of the intent. This string cannot contain carriage return, "
                    "newline, or tab characters."
                ),
            ),
            json_array("examples", "An array of user input examples for the intent."),
        ),
    ),
    OperationSpec(
        "get-intent",
        "Get intent",
        Endpoint("GET", "/v1/workspaces/{workspace_id}/intents/{intent}"),
        long_help=(
            "Get information about an intent, optionally including all intent content.With "
            "**export**=`false`, this operation is limited to 6000 requests per 5 minutes. With "
            "**export**=`true`, the limit is 400 requests per 30 minutes. For more information, "
            "see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("intent", "The intent name.", required=True),
            boolean("export", "Whether to include all element content in the returned data."),
            boolean(
                "include_audit",
                (
                    "Whether to include the audit properties (`created` and `updated` timestamps) "
                    "in the response."
                ),
            ),
        ),
    ),
    OperationSpec(
        "update-intent",
        "Update intent",
        Endpoint("POST", "/v1/workspaces/{workspace_id}/intents/{intent}"),
        long_help="Update an existing intent with new or modified data.",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("intent", "The intent name.", required=True),
            string("new_intent", "The name of the intent.", wire="intent"),
            string(
                "new_description",
                (
                    "The description of the intent. This string cannot contain carriage return, "
                    "newline, or tab characters."
                ),
                wire="description",
            ),
            json_array(
                "new_examples",
                "An array of user input examples for the intent.",
                wire="examples",
            ),
        ),
    ),
    OperationSpec(
        "delete-intent",
        "Delete intent",
        Endpoint("DELETE", "/v1/workspaces/{workspace_id}/intents/{intent}"),
        long_help=(
            "Delete an intent from a workspace.This operation is limited to 2000 requests per 30 "
            "minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("intent", "The intent name.", required=True),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "list-examples",
        "List user input examples",
        Endpoint("GET", "/v1/workspaces/{workspace_id}/intents/{intent}/examples"),
        long_help=(
            "List the user input examples for an intent, optionally including contextual entity "
            "mentions.This operation is limited to 2500 requests per 30 minutes. For more "
            "information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("intent", "The intent name.", required=True),
            integer("page_limit", "The number of records to return in each page of results."),
            string("sort", "The attribute by which returned examples will be sorted."),
            string("cursor", "A token identifying the page of results to retrieve."),
            boolean(
                "include_audit",
                (
                    "Whether to include the audit properties (`created` and `updated` timestamps) "
                    "in the response."
                ),
            ),
        ),
    ),
    OperationSpec(
        "create-example",
        "Create user input example",
        Endpoint("POST", "/v1/workspaces/{workspace_id}/intents/{intent}/examples"),
        long_help=(
            "Add a new user input example to an intent.If you want to add multiple exaples with a "
            "single API call, consider using the **[Update intent](#update-intent)** method "
            "instead.This operation is limited to 1000 requests per 30 minutes. For more "
            "information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("intent", "The intent name.", required=True),
            string("text", "The text of a user input example.", required=True),
            json_array("mentions", "An array of contextual entity mentions."),
        ),
    ),
    OperationSpec(
        "get-example",
        "Get user input example",
        Endpoint("GET", "/v1/workspaces/{workspace_id}/intents/{intent}/examples/{text}"),
        long_help=(
            "Get information about a user input example.This operation is limited to 6000 "
            "requests per 5 minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("intent", "The intent name.", required=True),
            string("text", "The text of the user input example.", required=True),
            boolean(
                "include_audit",
                (
                    "Whether to include the audit properties (`created` and `updated` timestamps) "
                    "in the response."
                ),
            ),
        ),
    ),
    OperationSpec(
        "update-example",
        "Update user input example",
        Endpoint("POST", "/v1/workspaces/{workspace_id}/intents/{intent}/examples/{text}"),
        long_help=(
            "Update the text of a user input example.If you want to update multiple examples with "
            "a single API call, consider using the **[Update intent](#update-intent)** method "
            "instead.This operation is limited to 1000 requests per 30 minutes. For more "
            "information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("intent", "The intent name.", required=True),
            string("text", "The text of the user input example.", required=True),
            string("new_text", "The text of the user input example.", wire="text"),
            json_array("new_mentions", "An array of contextual entity mentions.", wire="mentions"),
        ),
    ),
    OperationSpec(
        "delete-example",
        "Delete user input example",
        Endpoint("DELETE", "/v1/workspaces/{workspace_id}/intents/{intent}/examples/{text}"),
        long_help=(
            "Delete a user input example from an intent.This operation is limited to 1000 "
            "requests per 30 minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("intent", "The intent name.", required=True),
            string("text", "The text of the user input example.", required=True),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "list-counterexamples",
        "List counterexamples",
        Endpoint("GET", "/v1/workspaces/{workspace_id}/counterexamples"),
        long_help=(
            "List the counterexamples for a workspace. Counterexamples are examples that have "
            "been marked as irrelevant input.This operation is limited to 2500 requests per 30 "
            "minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            integer("page_limit", "The number of records to return in each page of results."),
            string("sort", "The attribute by which returned counterexamples will be sorted."),
            string("cursor", "A token identifying the page of results to retrieve."),
            boolean(
                "include_audit",
                (
                    "Whether to include the audit properties (`created` and `updated` timestamps) "
                    "in the response."
                ),
            ),
        ),
    ),
    OperationSpec(
        "create-counterexample",
        "Create counterexample",
        Endpoint("POST", "/v1/workspaces/{workspace_id}/counterexamples"),
        long_help=(
            "Add a new counterexample to a workspace. Counterexamples are examples that have been "
            "marked as irrelevant input.If you want to add multiple counterexamples with a single "
            "API call, consider using the **[Update workspace](#update-workspace)** method "
            "instead.This operation is limited to 1000 requests per 30 minutes."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("text", "The text of a user input marked as irrelevant input.", required=True),
        ),
    ),
    OperationSpec(
        "get-counterexample",
        "Get counterexample",
        Endpoint("GET", "/v1/workspaces/{workspace_id}/counterexamples/{text}"),
        long_help=(
            "Get information about a counterexample. Counterexamples are examples that have been "
            "marked as irrelevant input.This operation is limited to 6000 requests per 5 minutes. "
            "For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string(
                "text",
                "The text of a user input counterexample (for example, `What are you wearing?`).",
                required=True,
            ),
            boolean(
                "include_audit",
                (
                    "Whether to include the audit properties (`created` and `updated` timestamps) "
                    "in the response."
                ),
            ),
        ),
    ),
    OperationSpec(
        "update-counterexample",
        "Update counterexample",
        Endpoint("POST", "/v1/workspaces/{workspace_id}/counterexamples/{text}"),
        long_help=(
            "Update the text of a counterexample. Counterexamples are examples that have been "
            "marked as irrelevant input.If you want to update multiple counterexamples with a "
            "single API call, consider using the **[Update workspace](#update-workspace)** method "
            "instead.This operation is limited to 1000 requests per 30 minutes."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string(
                "text",
                "The text of a user input counterexample (for example, `What are you wearing?`).",
                required=True,
            ),
            string(
                "new_text",
                "The text of a user input marked as irrelevant input.",
                wire="text",
            ),
        ),
    ),
    OperationSpec(
        "delete-counterexample",
        "Delete counterexample",
        Endpoint("DELETE", "/v1/workspaces/{workspace_id}/counterexamples/{text}"),
        long_help=(
            "Delete a counterexample from a workspace. Counterexamples are examples that have "
            "been marked as irrelevant input.This operation is limited to 1000 requests per 30 "
            "minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string(
                "text",
                "The text of a user input counterexample (for example, `What are you wearing?`).",
                required=True,
            ),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "list-entities",
        "List entities",
        Endpoint("GET", "/v1/workspaces/{workspace_id}/entities"),
        long_help=(
            "List the entities for a workspace.With **export**=`false`, this operation is limited "
            "to 1000 requests per 30 minutes. With **export**=`true`, the limit is 200 requests "
            "per 30 minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            boolean("export", "Whether to include all element content in the returned data."),
            integer("page_limit", "The number of records to return in each page of results."),
            string("sort", "The attribute by which returned entities will be sorted."),
            string("cursor", "A token identifying the page of results to retrieve."),
            boolean(
                "include_audit",
                (
                    "Whether to include the audit properties (`created` and `updated` timestamps) "
                    "in the response."
                ),
            ),
        ),
    ),
    OperationSpec(
        "create-entity",
        "Create entity",
        Endpoint("POST", "/v1/workspaces/{workspace_id}/entities"),
        long_help=(
            "Create a new entity, or enable a system entity.If you want to create multiple "
            "entities with a single API call, consider using the **[Update "
            "workspace](#update-workspace)** method instead.This operation is limited to 1000 "
            "requests per 30 minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string(
                "description",
                (
                    "The description of the entity. This string cannot contain carriage return, "
                    "newline, or tab characters."
                ),
            ),
            json_object("metadata", "Any metadata related to the entity."),
            boolean("fuzzy_match", "Whether to use fuzzy matching for the entity."),
            json_array("values", "An array of objects describing the entity values."),
        ),
    ),
    OperationSpec(
        "get-entity",
        "Get entity",
        Endpoint("GET", "/v1/workspaces/{workspace_id}/entities/{entity}"),
        long_help=(
            "Get information about an entity, optionally including all entity content.With "
            "**export**=`false`, this operation is limited to 6000 requests per 5 minutes. With "
            "**export**=`true`, the limit is 200 requests per 30 minutes. For more information, "
            "see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            boolean("export", "Whether to include all element content in the returned data."),
            boolean(
                "include_audit",
                (
                    "Whether to include the audit properties (`created` and `updated` timestamps) "
                    "in the response."
                ),
            ),
        ),
    ),
    OperationSpec(
        "update-entity",
        "Update entity",
        Endpoint("POST", "/v1/workspaces/{workspace_id}/entities/{entity}"),
        long_help="Update an existing entity with new or modified data.",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string("new_entity", "The name of the entity.", wire="entity"),
            string(
                "new_description",
                (
                    "The description of the entity. This string cannot contain carriage return, "
                    "newline, or tab characters."
                ),
                wire="description",
            ),
            json_object("new_metadata", "Any metadata related to the entity.", wire="metadata"),
            boolean(
                "new_fuzzy_match",
                "Whether to use fuzzy matching for the entity.",
                wire="fuzzy_match",
            ),
            json_array(
                "new_values",
                "An array of objects describing the entity values.",
                wire="values",
            ),
        ),
    ),
    OperationSpec(
        "delete-entity",
        "Delete entity",
        Endpoint("DELETE", "/v1/workspaces/{workspace_id}/entities/{entity}"),
        long_help=(
            "Delete an entity from a workspace, or disable a system entity.This operation is "
            "limited to 1000 requests per 30 minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "list-mentions",
        "List entity mentions",
        Endpoint("GET", "/v1/workspaces/{workspace_id}/entities/{entity}/mentions"),
        long_help=(
            "List mentions for a contextual entity. An entity mention is an occurrence of a "
            "contextual entity in the context of an intent user input example.This operation is "
            "limited to 200 requests per 30 minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            boolean("export", "Whether to include all element content in the returned data."),
            boolean(
                "include_audit",
                (
                    "Whether to include the audit properties (`created` and `updated` timestamps) "
                    "in the response."
                ),
            ),
        ),
    ),
    OperationSpec(
        "list-values",
        "List entity values",
        Endpoint("GET", "/v1/workspaces/{workspace_id}/entities/{entity}/values"),
        long_help=(
            "List the values for an entity.This operation is limited to 2500 requests per 30 "
            "minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            boolean("export", "Whether to include all element content in the returned data."),
            integer("page_limit", "The number of records to return in each page of results."),
            string("sort", "The attribute by which returned entity values will be sorted."),
            string("cursor", "A token identifying the page of results to retrieve."),
            boolean(
                "include_audit",
                (
                    "Whether to include the audit properties (`created` and `updated` timestamps) "
                    "in the response."
                ),
            ),
        ),
    ),
    OperationSpec(
        "create-value",
        "Create entity value",
        Endpoint("POST", "/v1/workspaces/{workspace_id}/entities/{entity}/values"),
        long_help=(
            "Create a new value for an entity.If you want to create multiple entity values with a "
            "single API call, consider using the **[Update entity](#update-entity)** method "
            "instead.This operation is limited to 1000 requests per 30 minutes. For more "
            "information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string("value", "The text of the entity value.", required=True),
            json_object("metadata", "Any metadata related to the entity value."),
            string("type", "Specifies the type of entity value."),
            strings("synonyms", "An array of synonyms for the entity value."),
            strings("patterns", "An array of patterns for the entity value."),
        ),
    ),
    OperationSpec(
        "get-value",
        "Get entity value",
        Endpoint("GET", "/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}"),
        long_help=(
            "Get information about an entity value.This operation is limited to 6000 requests per "
            "5 minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string("value", "The text of the entity value.", required=True),
            boolean("export", "Whether to include all element content in the returned data."),
            boolean(
                "include_audit",
                (
                    "Whether to include the audit properties (`created` and `updated` timestamps) "
                    "in the response."
                ),
            ),
        ),
    ),
    OperationSpec(
        "update-value",
        "Update entity value",
        Endpoint("POST", "/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}"),
        long_help="Update an existing entity value with new or modified data.",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string("value", "The text of the entity value.", required=True),
            string("new_value", "The text of the entity value.", wire="value"),
            json_object(
                "new_metadata",
                "Any metadata related to the entity value.",
                wire="metadata",
            ),
            string("new_type", "Specifies the type of entity value.", wire="type"),
            strings("new_synonyms", "An array of synonyms for the entity value.", wire="synonyms"),
            strings("new_patterns", "An array of patterns for the entity value.", wire="patterns"),
        ),
    ),
    OperationSpec(
        "delete-value",
        "Delete entity value",
        Endpoint("DELETE", "/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}"),
        long_help=(
            "Delete a value from an entity.This operation is limited to 1000 requests per 30 "
            "minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string("value", "The text of the entity value.", required=True),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "list-synonyms",
        "List entity value synonyms",
        Endpoint("GET", "/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}/synonyms"),
        long_help=(
            "List the synonyms for an entity value.This operation is limited to 2500 requests per "
            "30 minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string("value", "The text of the entity value.", required=True),
            integer("page_limit", "The number of records to return in each page of results."),
            string(
                "sort",
                "The attribute by which returned entity value synonyms will be sorted.",
            ),
            string("cursor", "A token identifying the page of results to retrieve."),
            boolean(
                "include_audit",
                (
                    "Whether to include the audit properties (`created` and `updated` timestamps) "
                    "in the response."
                ),
            ),
        ),
    ),
    OperationSpec(
        "create-synonym",
        "Create entity value synonym",
        Endpoint("POST", "/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}/synonyms"),
        long_help=(
            "Add a new synonym to an entity value.If you want to create multiple synonyms with a "
            "single API call, consider using the **[Update entity](#update-entity)** or **[Update "
            "entity value](#update-entity-value)** method instead.This operation is limited to "
            "1000 requests per 30 minutes."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string("value", "The text of the entity value.", required=True),
            string("synonym", "The text of the synonym.", required=True),
        ),
    ),
    OperationSpec(
        "get-synonym",
        "Get entity value synonym",
        Endpoint("GET", "/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}/synonyms/{synonym}"),
        long_help=(
            "Get information about a synonym of an entity value.This operation is limited to 6000 "
            "requests per 5 minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string("value", "The text of the entity value.", required=True),
            string("synonym", "The text of the synonym.", required=True),
            boolean(
                "include_audit",
                (
                    "Whether to include the audit properties (`created` and `updated` timestamps) "
                    "in the response."
                ),
            ),
        ),
    ),
    OperationSpec(
        "update-synonym",
        "Update entity value synonym",
        Endpoint("POST", "/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}/synonyms/{synonym}"),
        long_help=(
            "Update an existing entity value synonym with new text.If you want to update multiple "
            "synonyms with a single API call, consider using the **[Update "
            "entity](#update-entity)** or **[Update entity value](#update-entity-value)** method "
            "instead.This operation is limited to 1000 requests per 30 minutes."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string("value", "The text of the entity value.", required=True),
            string("synonym", "The text of the synonym.", required=True),
            string("new_synonym", "The text of the synonym.", wire="synonym"),
        ),
    ),
    OperationSpec(
        "delete-synonym",
        "Delete entity value synonym",
        Endpoint("DELETE", "/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}/synonyms/{synonym}"),
        long_help=(
            "Delete a synonym from an entity value.This operation is limited to 1000 requests per "
            "30 minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string("value", "The text of the entity value.", required=True),
            string("synonym", "The text of the synonym.", required=True),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "list-dialog-nodes",
        "List dialog nodes",
        Endpoint("GET", "/v1/workspaces/{workspace_id}/dialog_nodes"),
        long_help=(
            "List the dialog nodes for a workspace.This operation is limited to 2500 requests per "
            "30 minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            integer("page_limit", "The number of records to return in each page of results."),
            string("sort", "The attribute by which returned dialog nodes will be sorted."),
            string("cursor", "A token identifying the page of results to retrieve."),
            boolean(
                "include_audit",
                (
                    "Whether to include the audit properties (`created` and `updated` timestamps) "
                    "in the response."
                ),
            ),
        ),
    ),
    OperationSpec(
        "create-dialog-node",
        "Create dialog node",
        Endpoint("POST", "/v1/workspaces/{workspace_id}/dialog_nodes"),
        long_help=(
            "Create a new dialog node.If you want to create multiple dialog nodes with a single "
            "API call, consider using the **[Update workspace](#update-workspace)** method "
            "instead.This operation is limited to 500 requests per 30 minutes. For more "
            "information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("dialog_node", "The dialog node ID.", required=True),
            string(
                "description",
                (
                    "The description of the dialog node. This string cannot contain carriage "
                    "return, newline, or tab characters."
                ),
            ),
            string(
                "conditions",
                (
                    "The condition that will trigger the dialog node. This string cannot contain "
                    "carriage return, newline, or tab characters."
                ),
            ),
            string(
                "parent",
                (
                    "The ID of the parent dialog node. This property is omitted if the dialog "
                    "node has no parent."
                ),
            ),
            string(
                "previous_sibling",
                (
                    "The ID of the previous sibling dialog node. This property is omitted if the "
                    "dialog node has no previous sibling."
                ),
            ),
            json_object(
                "create_dialog_node_output",
                "The output of the dialog node.",
                wire="output",
            ),
            json_object("context", "The context for the dialog node."),
            json_object("metadata", "The metadata for the dialog node."),
            json_object("next_step", "The next step to execute following this dialog node."),
            string("title", "The alias used to identify the dialog node."),
            string("type", "How the dialog node is processed."),
            string("event_name", "How an `event_handler` node is processed."),
            string("variable", "The location in the dialog context where output is stored."),
            json_array(
                "actions",
                "An array of objects describing any actions to be invoked by the dialog node.",
            ),
            string("digress_in", "Whether this top-level dialog node can be digressed into."),
            string(
                "digress_out",
                "Whether this dialog node can be returned to after a digression.",
            ),
            string(
                "digress_out_slots",
                "Whether the user can digress to top-level nodes while filling out slots.",
            ),
            string(
                "user_label",
                (
                    "A label that can be displayed externally to describe the purpose of the node "
                    "to users."
                ),
            ),
        ),
    ),
    OperationSpec(
        "get-dialog-node",
        "Get dialog node",
        Endpoint("GET", "/v1/workspaces/{workspace_id}/dialog_nodes/{dialog_node}"),
        long_help=(
            "Get information about a dialog node.This operation is limited to 6000 requests per 5 "
            "minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("dialog_node", "The dialog node ID (for example, `get_order`).", required=True),
            boolean(
                "include_audit",
                (
                    "Whether to include the audit properties (`created` and `updated` timestamps) "
                    "in the response."
                ),
            ),
        ),
    ),
    OperationSpec(
        "update-dialog-node",
        "Update dialog node",
        Endpoint("POST", "/v1/workspaces/{workspace_id}/dialog_nodes/{dialog_node}"),
        long_help=(
            "Update an existing dialog node with new or modified data.If you want to update "
            "multiple dialog nodes with a single API call, consider using the **[Update "
            "workspace](#update-workspace)** method instead.This operation is limited to 500 "
            "requests per 30 minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("dialog_node", "The dialog node ID (for example, `get_order`).", required=True),
            string("new_dialog_node", "The dialog node ID.", wire="dialog_node"),
            string(
                "new_description",
                (
                    "The description of the dialog node. This string cannot contain carriage "
                    "return, newline, or tab characters."
                ),
                wire="description",
            ),
            string(
                "new_conditions",
                (
                    "The condition that will trigger the dialog node. This string cannot contain "
                    "carriage return, newline, or tab characters."
                ),
                wire="conditions",
            ),
            string(
                "new_parent",
                (
                    "The ID of the parent dialog node. This property is omitted if the dialog "
                    "node has no parent."
                ),
                wire="parent",
            ),
            string(
                "new_previous_sibling",
                (
                    "The ID of the previous sibling dialog node. This property is omitted if the "
                    "dialog node has no previous sibling."
                ),
                wire="previous_sibling",
            ),
            json_object("new_output", "The output of the dialog node.", wire="output"),
            json_object("new_context", "The context for the dialog node.", wire="context"),
            json_object("new_metadata", "The metadata for the dialog node.", wire="metadata"),
            json_object(
                "new_next_step",
                "The next step to execute following this dialog node.",
                wire="next_step",
            ),
            string("new_title", "The alias used to identify the dialog node.", wire="title"),
            string("new_type", "How the dialog node is processed.", wire="type"),
            string(
                "new_event_name",
                "How an `event_handler` node is processed.",
                wire="event_name",
            ),
            string(
                "new_variable",
                "The location in the dialog context where output is stored.",
                wire="variable",
            ),
            json_array(
                "new_actions",
                "An array of objects describing any actions to be invoked by the dialog node.",
                wire="actions",
            ),
            string(
                "new_digress_in",
                "Whether this top-level dialog node can be digressed into.",
                wire="digress_in",
            ),
            string(
                "new_digress_out",
                "Whether this dialog node can be returned to after a digression.",
                wire="digress_out",
            ),
            string(
                "new_digress_out_slots",
                "Whether the user can digress to top-level nodes while filling out slots.",
                wire="digress_out_slots",
            ),
            string(
                "new_user_label",
                (
                    "A label that can be displayed externally to describe the purpose of the node "
                    "to users."
                ),
                wire="user_label",
            ),
        ),
    ),
    OperationSpec(
        "delete-dialog-node",
        "Delete dialog node",
        Endpoint("DELETE", "/v1/workspaces/{workspace_id}/dialog_nodes/{dialog_node}"),
        long_help=(
            "Delete a dialog node from a workspace.This operation is limited to 500 requests per "
            "30 minutes. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("dialog_node", "The dialog node ID (for example, `get_order`).", required=True),
        ),
        returns=ReturnKind.ACK,
    ),
    OperationSpec(
        "list-logs",
        "List log events in a workspace",
        Endpoint("GET", "/v1/workspaces/{workspace_id}/logs"),
        long_help=(
            "List the events from the log of a specific workspace.If **cursor** is not specified, "
            "this operation is limited to 40 requests per 30 minutes. If **cursor** is specified, "
            "the limit is 120 requests per minute. For more information, see **Rate limiting**."
        ),
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string(
                "sort",
                "How to sort the returned log events. You can sort by **request_timestamp**.",
            ),
            string(
                "filter",
                (
                    "A cacheable parameter that limits the results to those matching the "
                    "specified filter."
                ),
            ),
            integer("page_limit", "The number of records to return in each page of results."),
            string("cursor", "A token identifying the page of results to retrieve."),
        ),
    ),
    OperationSpec(
        "list-all-logs",
        "List log events in all workspaces",
        Endpoint("GET", "/v1/logs"),
        long_help=(
            "List the events from the logs of all workspaces in the service instance.If "
            "**cursor** is not specified, this operation is limited to 40 requests per 30 "
            "minutes. If **cursor** is specified, the limit is 120 requests per minute. For more "
            "information, see **Rate limiting**."
        ),
        flags=(
            string(
                "filter",
                (
                    "A cacheable parameter that limits the results to those matching the "
                    "specified filter."
                ),
                required=True,
            ),
            string(
                "sort",
                "How to sort the returned log events. You can sort by **request_timestamp**.",
            ),
            integer("page_limit", "The number of records to return in each page of results."),
            string("cursor", "A token identifying the page of results to retrieve."),
        ),
    ),
    OperationSpec(
        "delete-user-data",
        "Delete labeled data",
        Endpoint("DELETE", "/v1/user_data"),
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
    id="assistant-v1",
    short_help="Parent command for Watson Assistant v1",
    long_help=(
        "The IBM Watson&trade; Assistant service combines machine learning, natural language "
        "understanding, and an integrated dialog editor to create conversation flows between your "
        "apps and your users.The Assistant v1 API provides authoring methods your application can "
        "use to create or update a workspace."
    ),
    auth_key="assistant",
    default_url="https://gateway.watsonplatform.net/assistant/api",
    operations=OPERATIONS,
    versioned=True,
    confirm_running=True,
)
