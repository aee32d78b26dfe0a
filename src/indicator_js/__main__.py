from indicator_js.cli.cmd import main

main()
