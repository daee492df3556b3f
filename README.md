# tfproj

`tfproj` creates the directory layout and boilerplate `.tf` files for a
Terraform project. It never overwrites files that already exist. This means
you can run it again on an existing project to add modules or environments.

## Installation

```
pip install .
```

## Project styles

**stack**: each environment is a single root directory. Every module gets one
`<module>.tf` file in that directory. That file sources the module.

```
modules/
  vm/      main.tf variables.tf outputs.tf versions.tf
  vnet/    main.tf variables.tf outputs.tf versions.tf
envs/
  dev/     vm.tf vnet.tf variables.tf outputs.tf
```

**layered**: every module gets its own root directory in each environment.

```
modules/
  vm/      main.tf variables.tf outputs.tf versions.tf
  vnet/    main.tf variables.tf outputs.tf versions.tf
envs/
  dev/
    vm/    main.tf variables.tf outputs.tf
    vnet/  main.tf variables.tf outputs.tf
```

If you give no environments, the root files go straight in the project
directory:

- stack writes `<module>.tf`, sourcing `modules/<module>`.
- layered writes `<module>/main.tf`, sourcing `../modules/<module>`.

Generated files:

- In module directories, `main.tf`, `variables.tf` and `outputs.tf` are created empty.
- In module directories, `versions.tf` gets a starter `terraform` / `required_providers` block.
- Each root file that sources a module holds a block like:

```
module "vm" {
  source = "../../modules/vm"
}
```

## Usage

```
tfproj --create --modules vm,vnet --envs dev,prod --style stack --dir ./infra
tfproj --create --modules vm:vnet --style layered
tfproj --describe --style stack
```

Each option can be written with one dash or two, for example `-create` or `--create`.

| Option | Meaning |
| --- | --- |
| `--create` | Required when `--modules` or `--envs` is given. |
| `--modules LIST` | Module names to create. |
| `--envs LIST` | Environment names to create. |
| `--style STYLE` | `stack` or `layered`, in any letter case. Requires `--modules`. |
| `--dir PATH` | Project location. Defaults to the current directory. A trailing `/` or `\` is dropped. |
| `--describe` | Prints a description and example tree of the chosen style. Nothing is created. |

You can separate the names in a list with `,`, `:`, `;` or spaces.

### Errors and exit status

A style must be given both to build and to describe. Without one, `tfproj` prints a warning and then an error.

If `--modules` is not given and `--describe` is not set, nothing is created.

Errors are printed to standard output. The exit status is 1 on error and 0 otherwise.

## Library use

```python
from tfproj.build import Stack, Layered

Stack().build("infra", ["vm", "vnet"], ["dev"])
Layered().build("infra", ["vm"], [])
```

Other functions:

- `tfproj.cli.stack_description()` and `tfproj.cli.layered_description()` return the texts that `--describe` prints.
- `tfproj.cli.make_project(style)` returns a `Stack` or `Layered` for a style name.
- `tfproj.cli.run(argv)` runs the same steps as the command line. It raises `tfproj.cli.CliError` when the options are invalid.
- `tfproj.cli.main(argv)` catches those errors, prints them and returns the exit status.

## What it does not do

`tfproj` only creates files and directories. It does not:

- fill in providers or backends;
- run Terraform;
- preview the tree before creating it.