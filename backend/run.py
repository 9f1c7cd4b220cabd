from tasteapp import create_app

app = create_app()


print("Registered routes:")
for rule in app.url_map.iter_rules():
    print(f"{rule} -> endpoint={rule.endpoint} methods={sorted(rule.methods)}")

if __name__ == "__main__":
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
