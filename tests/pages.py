"""HTML-страницы для тестов в разметке таблицы лидеров."""


def make_row(name, high="1,250.00", low="1,180.50", last="1,234.50",
             prev="1,190.00", change="44.50", pct="3.74"):
    return (
        f"<tr><td><span><h3><a href='#'>{name}</a></h3></span></td>"
        f"<td>{high}</td><td>{low}</td><td>{last}</td>"
        f"<td>{prev}</td><td>{change}</td><td>{pct}</td></tr>"
    )


def make_page(*rows):
    return (
        "<html><body>"
        "<div class='hist_tbl_hm'><table>"
        "<thead><tr><th>Company Name</th><th>High</th></tr></thead>"
        f"<tbody>{''.join(rows)}</tbody>"
        "</table></div>"
        "<div class='hist_tbl_hm'><table><tbody>"
        f"{make_row('Second Table Ltd')}"
        "</tbody></table></div>"
        "</body></html>"
    )
