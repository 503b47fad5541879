class Templates:
    """Шаблоны для генерации файлов и HTML страниц"""

    service = """import {{ Injectable }} from '@angular/core';
import {{ HttpClient, HttpParams }} from '@angular/common/http';
import {{ Observable }} from 'rxjs';
{dto_imports}
function httpParamBuilder(queryParams: object): HttpParams {{
  let params = new HttpParams();
  Object.entries(queryParams ?? {{}}).forEach(([key, value]) => {{
    if (value !== undefined && value !== null) {{
      params = params.set(key, String(value));
    }}
  }});
  return params;
}}
{query_interfaces}
@Injectable({{ providedIn: 'root' }})
export class {service_name} {{
  constructor(private http: HttpClient) {{}}

  baseUrl(): string {{
    return '{base_url}';
  }}
{methods}}}
"""

    dto_header = "// Auto-generated DTO interfaces"

    index_page = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>API List</title>
    <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.0/dist/css/bootstrap.min.css" rel="stylesheet">
    <script src="https://unpkg.com/htmx.org@1.4.0"></script>
</head>
<body>
    <div class="container mt-4">
        <h1>{title}</h1>
        <div class="accordion" id="apiAccordion">
{items}
        </div>
    </div>

    <script src="https://cdn.jsdelivr.net/npm/bootstrap@5.3.0/dist/js/bootstrap.bundle.min.js"></script>
    <script>
        function copyToClipboard(elementId) {{
            const text = document.getElementById(elementId).textContent;
            navigator.clipboard.writeText(text).then(function() {{
                alert('Copied to clipboard!');
            }}, function(err) {{
                alert('Failed to copy text: ', err);
            }});
        }}
    </script>
</body>
</html>
"""

    index_item = """            <div class="accordion-item">
                <h2 class="accordion-header" id="heading{name}">
                    <button class="accordion-button collapsed" type="button" data-bs-toggle="collapse" data-bs-target="#collapse{name}" aria-expanded="false" aria-controls="collapse{name}" hx-get="/api-detail?api={query}" hx-trigger="click once" hx-target="#details-{name}" hx-swap="outerHTML">
                        {name} - {path}
                    </button>
                </h2>
                <div id="collapse{name}" class="accordion-collapse collapse" aria-labelledby="heading{name}" data-bs-parent="#apiAccordion">
                    <div class="accordion-body">
                        <div id="details-{name}">Loading...</div>
                        <button class="btn btn-sm btn-primary mt-2" onclick="copyToClipboard('details-{name}')">Copy to Clipboard</button>
                    </div>
                </div>
            </div>"""

    api_detail = """<div id="details-{name}">
<pre>{method}</pre>
{dtos}
</div>
"""

    dto_block = "<pre>{dto}</pre>"

    no_dtos = "<pre>No DTOs available.</pre>"


templates = Templates()
