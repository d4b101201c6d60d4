import subprocess

from loaders.attribute_flattener import flatten_attribute
from loaders.config import BASE_COMMAND, CLASS_KEY, SUBCOMMANDS
from models.entities import CommandResult, EntityKind

# Entity kind -> (console subcommand, per-attribute rewrite or None)
KIND_HANDLERS = {
    EntityKind.AGENT: (SUBCOMMANDS['agent'], None),
    EntityKind.CUSTOMER: (SUBCOMMANDS['customer'], None),
    EntityKind.CUSTOMER_USER: (SUBCOMMANDS['customer_user'], None),
    EntityKind.CI: (SUBCOMMANDS['ci'], flatten_attribute),
}


class ConsoleExecutor:
    """Runs console subcommands as separate processes, argument list, no shell."""

    def __init__(self, base_command=None):
        self.base_command = list(base_command or BASE_COMMAND)

    def run(self, subcommand, args) -> CommandResult:
        cmd = [*self.base_command, subcommand, *args]
        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except OSError as e:
            # Missing binary, not executable, ...
            return CommandResult(subcommand, list(args), None, str(e))

        output = (result.stdout or '') + (result.stderr or '')
        if output:
            print(output.rstrip())
        return CommandResult(subcommand, list(args), result.returncode, output)


def build_arguments(entity, flatten=None):
    """
    Turn one entity into the console's '--key value' argument list.

    Arguments follow the entity's key order ('class' first, then header
    order). The flattening function, when given, rewrites each pair first;
    'class' is never passed through it.

    Examples:
        >>> build_arguments({'name': 'Alice', 'email': 'a@x.com'})
        ['--name', 'Alice', '--email', 'a@x.com']

        >>> build_arguments({'class': 'Server', 'attr-Vendor': 'Dell'}, flatten_attribute)
        ['--class', 'Server', '--attribute', 'Vendor=Dell']
    """
    args = []
    for key, value in (entity or {}).items():
        if flatten and key != CLASS_KEY:
            key, value = flatten(key, value)
        args.extend(['--' + key, str(value)])
    return args


class CommandService:
    """
    Emits one console command per entity.

    Every command line is printed before it runs. In dry-run mode nothing is
    executed. Results of executed commands are returned but not inspected:
    a failing command never stops the remaining entities.
    """

    def __init__(self, executor=None, dry_run=False):
        self.executor = executor or ConsoleExecutor()
        self.dry_run = dry_run

    def format_command(self, subcommand, args):
        base = getattr(self.executor, 'base_command', BASE_COMMAND)
        return ' '.join([*base, subcommand, *args])

    def dispatch(self, kind, entities):
        """
        Emit the commands for all entities of one kind.

        Returns:
            list of (args, CommandResult or None) in entity order; the result
            is None in dry-run mode
        """
        subcommand, flatten = KIND_HANDLERS[EntityKind(kind)]
        emitted = []

        for entity in entities or []:
            args = build_arguments(entity, flatten)
            print(self.format_command(subcommand, args))

            if self.dry_run:
                emitted.append((args, None))
                continue

            emitted.append((args, self.executor.run(subcommand, args)))

        return emitted
