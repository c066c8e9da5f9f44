"""Fixed documentation attached to produced descriptors."""

BIND_ELEMENT = (
    "Binds the provided expression to the '{0}' attribute and a change event delegate "
    "to the '{1}' attribute."
)
BIND_ELEMENT_FORMAT = (
    "Specifies a format to convert the value specified by the '{0}' attribute. "
    "The format string can currently only be used with expressions of type <code>DateTime</code>."
)
BIND_ELEMENT_EVENT = (
    "Specifies the event handler name to attach for change notifications for the value "
    "provided by the '{0}' attribute."
)
BIND_ELEMENT_CULTURE = (
    "Specifies the culture to use for conversions."
)
BIND_ELEMENT_GET = "Specifies the expression to use for binding the value to the attribute."
BIND_ELEMENT_SET = (
    "Specifies the expression to use for updating the bound value when a new value is available."
)
BIND_ELEMENT_AFTER = "Specifies an action to run after the new value has been set."
BIND_COMPONENT = (
    "Binds the provided expression to the '{0}' property and a change event delegate "
    "to the '{1}' property of the component."
)
BIND_FALLBACK = (
    "Binds the provided expression to an attribute and a change event, based on the naming "
    "of the bind attribute. For example: <code>@bind-value=\"...\"</code> and "
    "<code>@bind-value:event=\"onchange\"</code> will assign the current value of the "
    "expression to the 'value' attribute, and assign a delegate that attempts to set the "
    "value to the 'onchange' attribute."
)
BIND_FALLBACK_FORMAT = (
    "Specifies a format to convert the value specified by the corresponding bind attribute. "
    "For example: <code>@bind-value:format=\"...\"</code> will apply a format string to the "
    "value specified in <code>@bind-value=\"...\"</code>. The format string can currently "
    "only be used with expressions of type <code>DateTime</code>."
)
BIND_FALLBACK_EVENT = (
    "Specifies the event handler name to attach for change notifications for the value "
    "provided by the '{0}' attribute."
)

EVENT_HANDLER = (
    "Sets the '{0}' attribute to the provided string or delegate value. "
    "A delegate value should be of type '{1}'."
)
EVENT_HANDLER_PREVENT_DEFAULT = (
    "Specifies whether to cancel (if cancelable) the default action that belongs to the '{0}' event."
)
EVENT_HANDLER_STOP_PROPAGATION = (
    "Specifies whether to prevent further propagation of the '{0}' event in the capturing "
    "and bubbling phases."
)

REF = "Populates the specified field or property with a reference to the element or component."
KEY = (
    "Ensures that the component or element will be preserved across renders if (and only if) "
    "the supplied key value matches."
)
SPLAT = "Merges a collection of attributes into the current element or component."

COMPONENT_TYPE_PARAMETER = "Specifies the type of the type parameter {0} for the {1} component."
CHILD_CONTENT_PARAMETER_NAME = "Specifies the parameter name for the '{0}' child content expression."
CHILD_CONTENT_PARAMETER_NAME_TOP_LEVEL = "Specifies the parameter name for all child content expressions."
