from schemelet.repl import main

main()
