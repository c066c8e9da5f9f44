"""Metadata names of the framework types discovery keys off."""

# Tag helper runtime
ITAG_HELPER = "Microsoft.AspNetCore.Razor.TagHelpers.ITagHelper"
HTML_TARGET_ELEMENT_ATTRIBUTE = "Microsoft.AspNetCore.Razor.TagHelpers.HtmlTargetElementAttribute"
HTML_ATTRIBUTE_NAME_ATTRIBUTE = "Microsoft.AspNetCore.Razor.TagHelpers.HtmlAttributeNameAttribute"
HTML_ATTRIBUTE_NOT_BOUND_ATTRIBUTE = "Microsoft.AspNetCore.Razor.TagHelpers.HtmlAttributeNotBoundAttribute"
RESTRICT_CHILDREN_ATTRIBUTE = "Microsoft.AspNetCore.Razor.TagHelpers.RestrictChildrenAttribute"
OUTPUT_ELEMENT_HINT_ATTRIBUTE = "Microsoft.AspNetCore.Razor.TagHelpers.OutputElementHintAttribute"
EDITOR_BROWSABLE_ATTRIBUTE = "System.ComponentModel.EditorBrowsableAttribute"

# Named arguments
HTML_TARGET_ELEMENT_ATTRIBUTES = "Attributes"
HTML_TARGET_ELEMENT_PARENT_TAG = "ParentTag"
HTML_TARGET_ELEMENT_TAG_STRUCTURE = "TagStructure"
HTML_ATTRIBUTE_NAME_DICTIONARY_PREFIX = "DictionaryAttributePrefix"

EDITOR_BROWSABLE_NEVER = 1

# Components
COMPONENTS_ASSEMBLY_NAME = "Microsoft.AspNetCore.Components"
COMPONENTS_NAMESPACE = "Microsoft.AspNetCore.Components"
ICOMPONENT = "Microsoft.AspNetCore.Components.IComponent"
COMPONENT_BASE = "Microsoft.AspNetCore.Components.ComponentBase"
PARAMETER_ATTRIBUTE = "Microsoft.AspNetCore.Components.ParameterAttribute"
EDITOR_REQUIRED_ATTRIBUTE = "Microsoft.AspNetCore.Components.EditorRequiredAttribute"
CASCADING_TYPE_PARAMETER_ATTRIBUTE = "Microsoft.AspNetCore.Components.CascadingTypeParameterAttribute"
RENDER_FRAGMENT = "Microsoft.AspNetCore.Components.RenderFragment"
RENDER_FRAGMENT_OF_T = "Microsoft.AspNetCore.Components.RenderFragment<TValue>"
EVENT_CALLBACK = "Microsoft.AspNetCore.Components.EventCallback"
EVENT_CALLBACK_OF_T = "Microsoft.AspNetCore.Components.EventCallback<TValue>"
BIND_ELEMENT_ATTRIBUTE = "Microsoft.AspNetCore.Components.BindElementAttribute"
BIND_INPUT_ELEMENT_ATTRIBUTE = "Microsoft.AspNetCore.Components.BindInputElementAttribute"
EVENT_HANDLER_ATTRIBUTE = "Microsoft.AspNetCore.Components.EventHandlerAttribute"

# Platform types
SYSTEM_STRING = "System.String"
SYSTEM_BOOLEAN = "System.Boolean"
SYSTEM_OBJECT = "System.Object"
SYSTEM_TYPE = "System.Type"
SYSTEM_DELEGATE = "System.Delegate"
SYSTEM_CULTURE_INFO = "System.Globalization.CultureInfo"
