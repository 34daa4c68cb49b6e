from outliner.interfaces.cli.main import main

main()
