"""Example script running each pattern demonstration in turn."""
from demos import DemoRunner, build_settings


def run_canonical_demos():
    """Run every demo with the default settings."""
    runner = DemoRunner()
    return runner.run()


def run_customised_demos():
    """Run demos with a different message, deeper decoration and new operands."""
    settings = build_settings(overrides={
        'observer': {'message': 'Hello again!'},
        'decorator': {'depth': 3},
        'strategy': {'operands': [10, 4]}
    })
    runner = DemoRunner(settings)
    return runner.run(['observer', 'decorator', 'strategy'])


if __name__ == "__main__":
    print("=" * 60)
    print("Canonical demos")
    print("=" * 60)
    run_canonical_demos()

    print("\n" + "=" * 60)
    print("Customised demos")
    print("=" * 60)
    run_customised_demos()
