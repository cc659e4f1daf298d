from nextkit.starter.scaffold.exceptions import CommandFailed, InputError, ScaffoldError
from nextkit.starter.scaffold.features import FEATURES, plan_dependencies
from nextkit.starter.scaffold.generator import FAILURE_POLICY, ProjectGenerator
from nextkit.starter.scaffold.mergers import merge_templates
from nextkit.starter.scaffold.runner import CommandRunner
