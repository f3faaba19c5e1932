from cargo_proc_macro.cli import main

main()
