from sealed.cli.app import main

main()
