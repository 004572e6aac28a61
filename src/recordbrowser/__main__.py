from recordbrowser.cli.main import main

main()
