from hydrostate.cli.main import main

main()
