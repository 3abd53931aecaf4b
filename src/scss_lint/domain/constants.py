TOOL_SECTION = "scss-lint"
LINTERS_KEY = "linters"
PARENT_POLICY_KEY = "parent_policy"
DEFAULT_CONFIG_RESOURCE = "default.yml"
